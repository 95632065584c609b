"""Domain error types."""


class TranslationFailedError(Exception):
    """Raised when a translator produces no usable text for a segment."""


class ScriptFormatError(Exception):
    """Raised when a recognizer replay script cannot be parsed."""


class TimestampParseError(ValueError):
    """Raised when an SRT/VTT timestamp is malformed."""


class ConfigFormatError(Exception):
    """Raised when a settings file is not a YAML mapping."""
