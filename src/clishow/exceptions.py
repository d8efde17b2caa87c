"""Custom exceptions for clishow."""


class ClishowError(Exception):
    """Base exception for documentation rendering errors."""

    pass


class TemplateError(ClishowError):
    """Template asset is missing or cannot be parsed."""

    pass


class UnsupportedFeatureError(ClishowError):
    """Command uses a feature the renderer cannot document."""

    pass


class MalformedMetadataError(ClishowError):
    """Argument parser reported metadata that breaks its own contract."""

    pass


class SourceError(ClishowError):
    """Command source cannot be imported or parsed."""

    pass


__all__ = [
    "ClishowError",
    "MalformedMetadataError",
    "SourceError",
    "TemplateError",
    "UnsupportedFeatureError",
]
