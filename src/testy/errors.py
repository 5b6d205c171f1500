"""Testy error types."""


class TestyError(Exception):
    """Base class for errors raised by testy itself (never by test bodies)."""

    __test__ = False


class NoCurrentTestError(TestyError):
    """Raised when an assertion reports outside of a running test."""

    def __init__(self) -> None:
        super().__init__(
            "No test is running. Assertions must be called from inside a test body."
        )


class UnknownLanguageError(TestyError):
    """Raised when a language has no bundled translations."""

    def __init__(self, language: str, available: list[str]) -> None:
        self.language = language
        self.available = available
        super().__init__(
            f"Unknown language: {language}. Available: {', '.join(available)}"
        )


class MissingTranslationError(TestyError):
    """Raised when a message key is missing from every bundled language."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing translation for key: {key}")


class ConfigError(TestyError):
    """Raised when the [tool.testy] configuration cannot be loaded."""

    def __init__(self, path: object, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        message = f"Invalid testy configuration in {path}"
        if cause:
            message += f"\nCause: {cause}"
        super().__init__(message)


__all__ = [
    "ConfigError",
    "MissingTranslationError",
    "NoCurrentTestError",
    "TestyError",
    "UnknownLanguageError",
]
