"""Core building blocks - units, paper formats, options, temp files, errors."""

from .deadline import Deadline
from .errors import (
    ChromePdfError,
    ConfigurationError,
    ConversionTimeoutError,
    DirectoryCreateError,
    DirectoryNotWritableError,
    InvalidScaleError,
    InvalidUnitError,
    MissingContentError,
    ProtocolError,
    ResourceError,
    UnknownPaperFormatError,
)
from .options import Margins, PdfOptions, PdfOptionsBuilder
from .paper import PAPER_FORMATS, get_paper_size
from .temp_file import TempHtmlFile
from .units import UNIT_TO_PIXELS, to_inches

__all__ = [
    "Deadline",
    "ChromePdfError",
    "ConfigurationError",
    "ConversionTimeoutError",
    "DirectoryCreateError",
    "DirectoryNotWritableError",
    "InvalidScaleError",
    "InvalidUnitError",
    "MissingContentError",
    "ProtocolError",
    "ResourceError",
    "UnknownPaperFormatError",
    "Margins",
    "PdfOptions",
    "PdfOptionsBuilder",
    "PAPER_FORMATS",
    "get_paper_size",
    "TempHtmlFile",
    "UNIT_TO_PIXELS",
    "to_inches",
]
