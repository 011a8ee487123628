import dataclasses

import pytest

from chromepdf.core.errors import (
    ConfigurationError,
    InvalidScaleError,
    UnknownPaperFormatError,
)
from chromepdf.core.options import EMPTY_TEMPLATE, PdfOptions, PdfOptionsBuilder


def test_defaults_are_a4_portrait():
    options = PdfOptionsBuilder().build()

    assert options.paper_width == 8.27
    assert options.paper_height == 11.7
    assert options.orientation == "portrait"
    assert (options.margins.top, options.margins.right) == (0.4, 0.4)
    assert (options.margins.bottom, options.margins.left) == (0.4, 0.4)
    assert options.scale == 1


@pytest.mark.parametrize("name", ["A4", "a4"])
def test_paper_format_any_case(name):
    options = PdfOptionsBuilder().set_paper_format(name).build()

    assert (options.paper_width, options.paper_height) == (8.27, 11.7)


def test_unknown_paper_format_keeps_geometry():
    builder = PdfOptionsBuilder().set_paper_format("letter")

    with pytest.raises(UnknownPaperFormatError):
        builder.set_paper_format("unknown")

    options = builder.build()
    assert (options.paper_width, options.paper_height) == (8.5, 11)


def test_most_recent_geometry_wins():
    options = (
        PdfOptionsBuilder()
        .set_paper_format("legal")
        .set_paper_width(100, "mm")
        .build()
    )
    assert options.paper_width == pytest.approx(100 * 3.78 / 96)
    assert options.paper_height == 14

    options = (
        PdfOptionsBuilder()
        .set_paper_width(5)
        .set_paper_format("ledger")
        .build()
    )
    assert (options.paper_width, options.paper_height) == (17, 11)


def test_margins_converted_per_unit():
    options = PdfOptionsBuilder().set_margins(96, 48, 0, 192, unit="px").build()

    assert options.margins.top == 1
    assert options.margins.right == 0.5
    assert options.margins.bottom == 0
    assert options.margins.left == 2


def test_setters_chain():
    builder = PdfOptionsBuilder()

    assert builder.landscape() is builder
    assert builder.set_scale(1.5) is builder
    assert builder.set_page_ranges("1-2") is builder


def test_outline_forces_tagging():
    builder = PdfOptionsBuilder().set_generate_document_outline(True)

    assert builder.generate_tagged_pdf is True
    assert builder.build().generate_tagged_pdf is True


def test_outline_false_keeps_independent_tagging():
    builder = (
        PdfOptionsBuilder()
        .set_generate_tagged_pdf(True)
        .set_generate_document_outline(True)
        .set_generate_document_outline(False)
    )

    assert builder.generate_tagged_pdf is True
    assert builder.build().generate_tagged_pdf is True


def test_outline_false_alone_does_not_tag():
    builder = PdfOptionsBuilder().set_generate_document_outline(True)
    builder.set_generate_document_outline(False)

    assert builder.generate_tagged_pdf is False


def test_header_only_fills_footer():
    builder = PdfOptionsBuilder().set_header("<span>Title</span>")
    params = builder.build().to_print_params()

    assert builder.display_header_footer is True
    assert params["displayHeaderFooter"] is True
    assert params["headerTemplate"] == "<span>Title</span>"
    assert params["footerTemplate"] == EMPTY_TEMPLATE


def test_footer_only_fills_header():
    params = PdfOptionsBuilder().set_footer("<span>1</span>").build().to_print_params()

    assert params["headerTemplate"] == EMPTY_TEMPLATE
    assert params["footerTemplate"] == "<span>1</span>"


def test_default_print_params():
    params = PdfOptionsBuilder().build().to_print_params()

    assert params == {
        "landscape": False,
        "marginTop": 0.4,
        "marginRight": 0.4,
        "marginBottom": 0.4,
        "marginLeft": 0.4,
        "preferCSSPageSize": False,
        "printBackground": False,
        "scale": 1,
        "displayHeaderFooter": False,
        "paperWidth": 8.27,
        "paperHeight": 11.7,
    }


def test_print_params_optional_fields():
    params = (
        PdfOptionsBuilder()
        .landscape()
        .set_paper_width(0)
        .set_page_ranges("")
        .set_generate_document_outline(True)
        .build()
        .to_print_params()
    )

    assert params["landscape"] is True
    assert "paperWidth" not in params
    assert "pageRanges" not in params
    assert params["generateTaggedPDF"] is True
    assert params["generateDocumentOutline"] is True


def test_page_ranges_passed_through():
    params = PdfOptionsBuilder().set_page_ranges("1-5, 8").build().to_print_params()

    assert params["pageRanges"] == "1-5, 8"


@pytest.mark.parametrize("scale", [0.05, 0.1, 2.5, 0])
def test_scale_out_of_range_rejected(scale):
    with pytest.raises(InvalidScaleError):
        PdfOptionsBuilder().set_scale(scale).build()


@pytest.mark.parametrize("scale", [0.11, 1, 2])
def test_scale_bounds_accepted(scale):
    assert PdfOptionsBuilder().set_scale(scale).build().scale == scale


def test_snapshot_is_frozen_and_independent():
    builder = PdfOptionsBuilder().set_content("<p>a</p>")
    snapshot = builder.build()

    builder.set_content("<p>b</p>").landscape()

    assert snapshot.content == "<p>a</p>"
    assert snapshot.orientation == "portrait"
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.content = "changed"


def test_snapshot_enforces_outline_rule_directly():
    options = PdfOptions(generate_document_outline=True)

    assert options.generate_tagged_pdf is True


@pytest.mark.parametrize("scale", [None, "1.5", True])
def test_non_numeric_scale_rejected(scale):
    with pytest.raises(InvalidScaleError) as exc:
        PdfOptionsBuilder().set_scale(scale).build()

    assert isinstance(exc.value, ConfigurationError)
