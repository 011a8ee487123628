from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import InvalidScaleError
from .paper import get_paper_size
from .units import to_inches

PORTRAIT = "portrait"
LANDSCAPE = "landscape"

EMPTY_TEMPLATE = "<p></p>"

MIN_SCALE = 0.1
MAX_SCALE = 2.0


@dataclass(frozen=True)
class Margins:
    """Page margins in inches."""
    top: float = 0.4
    right: float = 0.4
    bottom: float = 0.4
    left: float = 0.4


# -------------------------------------------------
# FROZEN SNAPSHOT (one per conversion)
# -------------------------------------------------
@dataclass(frozen=True)
class PdfOptions:
    """
    Immutable print configuration consumed by a single conversion.

    Derived rules live here, not in the setters:
    - a document outline requires a tagged PDF
    - a header or footer turns header/footer display on
    """
    content: Optional[str] = None
    orientation: str = PORTRAIT

    paper_width: Optional[float] = 8.27
    paper_height: Optional[float] = 11.7
    margins: Margins = field(default_factory=Margins)

    scale: float = 1
    header: Optional[str] = None
    footer: Optional[str] = None
    display_header_footer: bool = False

    prefer_css_page_size: bool = False
    print_background: bool = False
    generate_tagged_pdf: bool = False
    generate_document_outline: bool = False
    page_ranges: Optional[str] = None

    def __post_init__(self):
        # bool is an int subclass, but never a meaningful scale
        if not isinstance(self.scale, (int, float)) or isinstance(self.scale, bool):
            raise InvalidScaleError(self.scale)

        if not MIN_SCALE < self.scale <= MAX_SCALE:
            raise InvalidScaleError(self.scale)

        if self.generate_document_outline and not self.generate_tagged_pdf:
            object.__setattr__(self, "generate_tagged_pdf", True)

        if self.has_header_footer and not self.display_header_footer:
            object.__setattr__(self, "display_header_footer", True)

    @property
    def has_header_footer(self) -> bool:
        return self.header is not None or self.footer is not None

    @property
    def is_landscape(self) -> bool:
        return self.orientation == LANDSCAPE

    def to_print_params(self) -> Dict[str, Any]:
        """
        Assemble the `Page.printToPDF` parameters (DevTools camelCase keys).
        """
        params: Dict[str, Any] = {
            "landscape": self.is_landscape,
            "marginTop": self.margins.top,
            "marginRight": self.margins.right,
            "marginBottom": self.margins.bottom,
            "marginLeft": self.margins.left,
            "preferCSSPageSize": self.prefer_css_page_size,
            "printBackground": self.print_background,
            "scale": self.scale,
            "displayHeaderFooter": self.display_header_footer,
        }

        if self.paper_width:
            params["paperWidth"] = self.paper_width

        if self.paper_height:
            params["paperHeight"] = self.paper_height

        if self.page_ranges:
            params["pageRanges"] = self.page_ranges

        if self.has_header_footer:
            params["displayHeaderFooter"] = True
            params["headerTemplate"] = (
                self.header if self.header is not None else EMPTY_TEMPLATE
            )
            params["footerTemplate"] = (
                self.footer if self.footer is not None else EMPTY_TEMPLATE
            )

        if self.generate_tagged_pdf or self.generate_document_outline:
            params["generateTaggedPDF"] = True

        if self.generate_document_outline:
            params["generateDocumentOutline"] = True

        return params


# -------------------------------------------------
# FLUENT BUILDER
# -------------------------------------------------
class PdfOptionsBuilder:
    """
    Chainable setters over a PdfOptions value.

    Every setter records one logical field and returns the builder;
    `build()` hands out frozen values that later calls can never mutate.
    Validation that depends on a single field (paper format, unit) fails
    in the setter and leaves the previous state untouched; scale range is
    validated by `build()`.
    """

    def __init__(self):
        self._fields: Dict[str, Any] = {}

    def _set(self, **changes):
        self._fields.update(changes)
        return self

    def _get(self, name: str):
        if name in self._fields:
            return self._fields[name]
        return PdfOptions.__dataclass_fields__[name].default

    # -----------------------------
    # CONTENT
    # -----------------------------
    def set_content(self, content: Optional[str]):
        return self._set(content=content)

    @property
    def content(self) -> Optional[str]:
        return self._get("content")

    # -----------------------------
    # GEOMETRY
    # -----------------------------
    def set_paper_format(self, name: str):
        width, height = get_paper_size(name)
        return self._set(paper_width=width, paper_height=height)

    def set_paper_width(self, width: float, unit: str = "in"):
        return self._set(paper_width=to_inches(width, unit))

    def set_paper_height(self, height: float, unit: str = "in"):
        return self._set(paper_height=to_inches(height, unit))

    def portrait(self):
        return self._set(orientation=PORTRAIT)

    def landscape(self):
        return self._set(orientation=LANDSCAPE)

    def set_margins(
        self,
        top: float,
        right: float,
        bottom: float,
        left: float,
        unit: str = "in",
    ):
        margins = Margins(
            top=to_inches(top, unit),
            right=to_inches(right, unit),
            bottom=to_inches(bottom, unit),
            left=to_inches(left, unit),
        )
        return self._set(margins=margins)

    def set_scale(self, scale: float):
        return self._set(scale=scale)

    # -----------------------------
    # HEADER / FOOTER
    # -----------------------------
    def set_header(self, header: Optional[str]):
        return self._set(header=header)

    def set_footer(self, footer: Optional[str]):
        return self._set(footer=footer)

    def set_display_header_footer(self, display: bool):
        return self._set(display_header_footer=display)

    # -----------------------------
    # RENDERING FLAGS
    # -----------------------------
    def set_prefer_css_page_size(self, prefer_css: bool):
        return self._set(prefer_css_page_size=prefer_css)

    def set_print_background(self, print_background: bool):
        return self._set(print_background=print_background)

    def set_generate_tagged_pdf(self, tagged: bool):
        return self._set(generate_tagged_pdf=tagged)

    def set_generate_document_outline(self, outline: bool):
        return self._set(generate_document_outline=outline)

    def set_page_ranges(self, page_ranges: Optional[str]):
        return self._set(page_ranges=page_ranges)

    # -----------------------------
    # DERIVED READS
    # -----------------------------
    @property
    def generate_tagged_pdf(self) -> bool:
        return bool(
            self._get("generate_tagged_pdf")
            or self._get("generate_document_outline")
        )

    @property
    def display_header_footer(self) -> bool:
        return bool(
            self._get("display_header_footer")
            or self._get("header") is not None
            or self._get("footer") is not None
        )

    def build(self) -> PdfOptions:
        return PdfOptions(**self._fields)

