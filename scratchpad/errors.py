"""Error types raised by the editor."""

from __future__ import annotations


class Error(Exception):
    """Base class for every error the editor reports."""

    description = "error"

    def __init__(self) -> None:
        super().__init__(self.description)

    def __str__(self) -> str:
        return self.description

    def chain(self) -> list[BaseException]:
        """Return this error followed by the errors that caused it."""
        chain: list[BaseException] = []
        current: BaseException | None = self
        while current is not None and current not in chain:
            chain.append(current)
            current = current.__cause__ or current.__context__
        return chain


class EventLoopBuildError(Error):
    description = "failed to build event loop"


class CreateWindowError(Error):
    description = "failed to create window"


class CreateSurfaceError(Error):
    description = "failed to create surface"


class CurrentTextureError(Error):
    description = "failed to get current texture"


class DeviceError(Error):
    description = "failed to get device"


class RunAppError(Error):
    description = "failed to run app"


class InternalError(Error):
    """An error described only by a message."""

    def __init__(self, message: str) -> None:
        self.message = str(message)
        Exception.__init__(self, self.message)

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"internal error: {self.message}"


def internal(message: object) -> InternalError:
    """Build an internal error carrying ``message``."""
    return InternalError(str(message))