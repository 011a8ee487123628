"""
chromepdf v1.0

Fluent HTML → PDF conversion through headless Chromium's
DevTools protocol.
"""

from .__version__ import __version__

# Keep package init lightweight: Playwright is imported only when a
# conversion launches the default browser.

from .converter import PdfConverter
from .core import (
    ChromePdfError,
    ConfigurationError,
    ConversionTimeoutError,
    MissingContentError,
    PdfOptions,
    PdfOptionsBuilder,
    ProtocolError,
    ResourceError,
    TempHtmlFile,
    to_inches,
)

__all__ = [
    "__version__",
    "PdfConverter",
    "PdfOptions",
    "PdfOptionsBuilder",
    "TempHtmlFile",
    "to_inches",
    "ChromePdfError",
    "ConfigurationError",
    "ConversionTimeoutError",
    "MissingContentError",
    "ProtocolError",
    "ResourceError",
]
