from .commands import CommandPlanner
from .files import FileTreeGenerator

__all__ = ["CommandPlanner", "FileTreeGenerator"]
