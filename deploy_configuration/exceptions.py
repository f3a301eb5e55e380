"""
Deploy Configuration Exception Hierarchy

Errors raised while assembling a deploy configuration.
"""

from typing import Optional


class DeployConfigurationError(Exception):
    """Base exception for all deploy configuration errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class InvalidArgumentError(DeployConfigurationError, ValueError):
    """Raised when a required value is empty or missing."""

    pass


class EmptyRepositoryError(InvalidArgumentError):
    """Raised when a configuration is created without a git repository."""

    def __init__(self):
        message = "Git repository is required"
        context = "Example: Configuration('git@github.com:acme/shop.git')"
        super().__init__(message, context)
