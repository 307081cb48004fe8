"""CodeTint exception classes."""

__all__ = [
    "BuildError",
    "CodeTintError",
    "EventProcessingError",
    "HighlightError",
    "HighlighterInitError",
    "InvalidThemeJsonError",
    "ThemeError",
    "ThemeFileNotFoundError",
    "ThemeFileReadError",
    "ThemeNotFoundError",
]


class CodeTintError(Exception):
    """Base exception for CodeTint related errors."""


class ThemeError(CodeTintError):
    """Base exception for theme lookup and loading failures."""


class ThemeNotFoundError(ThemeError, LookupError):
    """Raised when a theme name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"theme {name!r} not found")


class InvalidThemeJsonError(ThemeError, ValueError):
    """Raised when a theme definition cannot be parsed or fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(f"invalid theme json: {message}")


class ThemeFileNotFoundError(ThemeError, FileNotFoundError):
    """Raised when a theme file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"theme file not found: {path}")


class ThemeFileReadError(ThemeError, OSError):
    """Raised when a theme file exists but cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(f"failed to read theme file: {message}")


class HighlightError(CodeTintError):
    """Base exception for highlight run failures."""


class HighlighterInitError(HighlightError):
    """Raised when the parser cannot be initialized for a language."""

    def __init__(self, language: str, reason: str) -> None:
        self.language = language
        super().__init__(f"failed to initialize highlighter for {language!r}: {reason}")


class EventProcessingError(HighlightError):
    """Raised when the event stream or a streaming callback fails mid-run."""


class BuildError(CodeTintError, ValueError):
    """Raised when a formatter is configured with invalid options."""
