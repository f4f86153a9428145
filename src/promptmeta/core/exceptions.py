"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field


class PromptMetaError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class PluginValidationError(PromptMetaError):
    """Raised when a plugin manifest fails validation."""

    errors: list[str] = field(default_factory=list)
    message: str = "Plugin validation failed"

    def __str__(self) -> str:
        """Return error message payload."""
        if not self.errors:
            return self.message
        return self.message + ":\n" + "\n".join(self.errors)
