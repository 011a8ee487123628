"""
Error taxonomy for HTML → PDF conversion.

- ConfigurationError : bad options, raised before any resource is acquired
- ResourceError      : temp folder problems, raised before any file is written
- ProtocolError      : browser / DevTools failures, raised after teardown
- ConversionTimeoutError : the conversion deadline elapsed
"""


class ChromePdfError(Exception):
    """Base class for every chromepdf error."""


# -------------------------------------------------
# CONFIGURATION
# -------------------------------------------------
class ConfigurationError(ChromePdfError, ValueError):
    pass


class MissingContentError(ConfigurationError):
    def __init__(self):
        super().__init__(
            'Missing content, set content by calling "set_content(html)"'
        )


class UnknownPaperFormatError(ConfigurationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Paper format "{name}" does not exist')


class InvalidUnitError(ConfigurationError):
    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f'Unknown measurement unit "{unit}"')


class InvalidScaleError(ConfigurationError):
    def __init__(self, scale):
        self.scale = scale
        super().__init__(
            f"Scale must be a number above 0.1 and at most 2, got {scale!r}"
        )


# -------------------------------------------------
# RESOURCES
# -------------------------------------------------
class ResourceError(ChromePdfError, OSError):
    pass


class DirectoryCreateError(ResourceError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Unable to create directory: {path}")


class DirectoryNotWritableError(ResourceError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Unable to write in directory: {path}")


# -------------------------------------------------
# BROWSER / PROTOCOL
# -------------------------------------------------
class ProtocolError(ChromePdfError):
    pass


class ConversionTimeoutError(ChromePdfError, TimeoutError):
    pass
