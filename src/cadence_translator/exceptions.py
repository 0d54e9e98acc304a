"""Custom exception classes for cadence-translator library."""


class TranslationError(Exception):
    """Base exception for translation-related errors."""

    pass


class ConfigNotFoundError(TranslationError, FileNotFoundError):
    """Raised when the flow.json configuration file is not found."""

    pass


class InvalidConfigError(TranslationError, ValueError):
    """Raised when the configuration document has an unexpected shape."""

    pass


class InvalidContractNameError(TranslationError, ValueError):
    """Raised when a contract name cannot be turned into a variable key."""

    pass


class SourceDirectoryError(TranslationError, OSError):
    """Raised when a source directory is missing or cannot be listed."""

    pass


class SourceFileError(TranslationError, OSError):
    """Raised when a file inside a source directory cannot be read."""

    pass
