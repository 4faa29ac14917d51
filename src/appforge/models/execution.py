from pydantic import BaseModel, ConfigDict


class ExecutionResult(BaseModel):
    """Outcome of replaying a single command or file write."""

    model_config = ConfigDict(frozen=True)

    output: str
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls, output: str) -> "ExecutionResult":
        return cls(output=output, success=True)

    @classmethod
    def failed(cls, error: str, output: str = "") -> "ExecutionResult":
        return cls(output=output, success=False, error=error)
