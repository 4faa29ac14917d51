from .backend import ExecutionBackend, SimulatedBackend
from .classifier import CommandClassifier
from .engine import ExecutionEngine

__all__ = ["CommandClassifier", "ExecutionBackend", "ExecutionEngine", "SimulatedBackend"]
