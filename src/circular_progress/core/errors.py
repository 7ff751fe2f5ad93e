"""Errors raised by the progress computation core."""


class InvalidConfigurationError(ValueError):
    """A configuration value is outside its documented range.

    Raised synchronously at the point of configuration. The core never clamps
    such values silently.
    """
