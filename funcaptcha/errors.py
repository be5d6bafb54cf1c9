"""Error classes for the FunCaptcha flow tables."""

from typing import Optional


class FlowNotFoundError(KeyError):
    """An exception raised when a flow is not present in a flow table."""

    def __init__(self, flow: str) -> None:
        self.flow = flow
        super().__init__(f"The flow '{flow}' was not found.")

    def __str__(self) -> str:
        return self.args[0]


class InvalidConfigError(Exception):
    """An exception raised when a flow override configuration is invalid."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "The flow configuration is invalid.")
