"""Result models handed back to the reconcile loop."""

from pydantic import BaseModel, Field


class InvocationResult(BaseModel):
    """Result of building one tool invocation.

    ``args`` is empty whenever ``success`` is False.
    """

    success: bool
    tool: str
    args: list[str] = Field(default_factory=list)
    suffix: str | None = None  # compatibility suffix when the job names a tool version
    error: str | None = None


class CommitTsResult(BaseModel):
    """Result of reading the commit position from a finished dump."""

    success: bool
    commit_ts: str | None = None
    error: str | None = None
