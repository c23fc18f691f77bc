"""
Error types for token loading, transformation, and platform builds.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenBuildError(Exception):
    """Base exception for all tokenbuild errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(TokenBuildError):
    """
    Raised when the build configuration cannot be loaded or used.

    Examples:
    - Invalid YAML in tokenbuild.yaml
    - Unknown keys or wrong types in a platform block
    - A requested platform that is not configured
    """

    pass


class TokenSourceError(TokenBuildError):
    """
    Raised when a token source file cannot be read.

    Examples:
    - Missing tokens directory or theme file
    - Invalid JSON
    - A root value that is not an object
    """

    pass


class TokenReferenceError(TokenBuildError):
    """
    Raised when an alias value cannot be resolved.

    Examples:
    - {color.base.red} where no such token exists
    - Two tokens that reference each other
    """

    pass


class MalformedTokenError(TokenBuildError):
    """
    Raised when a token lacks the attributes a format needs.

    Examples:
    - A color token without a type or item segment
    - A font token without an item segment
    """

    pass


class ThemeNameError(TokenBuildError):
    """
    Raised when the theme name cannot be determined.

    Examples:
    - No FONTTHEMENAMEVARIABLE token in the theme
    - More than one FONTTHEMENAMEVARIABLE token
    - The marker token has an empty description
    """

    pass


class RegistryError(TokenBuildError):
    """
    Raised when a transform, group, filter, or format is not registered.
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the source or config file involved
        token: Optional dotted token path
        platform: Optional platform name being built
    """

    file: Path | None = None
    token: str | None = None
    platform: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens/light.json: color.background.primary [css]"
        """
        parts: list[str] = []
        if self.file:
            parts.append(str(self.file))
        if self.token:
            parts.append(self.token)
        location = ": ".join(parts)
        if self.platform:
            location = f"{location} [{self.platform}]" if location else f"[{self.platform}]"
        return location


def make_source_error(message: str, file: Path | None = None) -> TokenSourceError:
    """
    Helper to create a TokenSourceError with optional file context.

    Args:
        message: Error description
        file: Optional source file path

    Returns:
        TokenSourceError with context if a file was given
    """
    if file:
        return TokenSourceError(message, ErrorContext(file=file))
    return TokenSourceError(message)


def make_malformed_token_error(
    message: str,
    token: str,
    file: Path | None = None,
) -> MalformedTokenError:
    """
    Helper to create a MalformedTokenError pointing at one token.

    Args:
        message: Error description
        token: Token name or dotted path
        file: Optional source file the token came from

    Returns:
        MalformedTokenError with context attached
    """
    return MalformedTokenError(message, ErrorContext(file=file, token=token))
