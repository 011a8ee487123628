"""
chromepdf CLI

    chromepdf page.html -o page.pdf --format a4 --margins 10 10 10 10 --unit mm
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional

from chromepdf.__version__ import __version__
from chromepdf.automation.retry import retry
from chromepdf.config.loader import load_config
from chromepdf.converter import PdfConverter
from chromepdf.core.errors import ChromePdfError, ConversionTimeoutError, ProtocolError
from chromepdf.utils.logger import get_logger


# -------------------------------------------------
# ARGUMENTS → CONFIG OVERRIDES
# -------------------------------------------------
def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """
    Copy every option given on the command line over the loaded config.
    Options left at their argparse default (None / False) keep the
    config file value.
    """
    pdf = config["pdf"]
    browser = config["browser"]
    render = config["render"]

    overrides = [
        (pdf, "paper_format", args.format),
        (pdf, "paper_width", args.width),
        (pdf, "paper_height", args.height),
        (pdf, "margins", args.margins),
        (pdf, "unit", args.unit),
        (pdf, "scale", args.scale),
        (pdf, "header", args.header),
        (pdf, "footer", args.footer),
        (pdf, "page_ranges", args.page_ranges),
        (browser, "executable_path", args.chrome),
        (browser, "timeout", args.timeout),
        (render, "temp_folder", args.temp_folder),
        (render, "wait_for_lifecycle_event", args.wait_for),
        (render, "emulate_media", args.emulate_media),
    ]
    for section, key, value in overrides:
        if value is not None:
            section[key] = value

    flags = [
        (pdf, "print_background", args.print_background),
        (pdf, "prefer_css_page_size", args.prefer_css_page_size),
        (pdf, "generate_tagged_pdf", args.tagged),
        (pdf, "generate_document_outline", args.outline),
        (render, "disable_script_execution", args.disable_scripts),
    ]
    for section, key, value in flags:
        if value:
            section[key] = True

    if args.landscape:
        pdf["orientation"] = "landscape"

    if args.chrome_arg:
        browser["args"] = list(browser.get("args") or []) + args.chrome_arg

    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromepdf",
        description=f"chromepdf v{__version__} - HTML to PDF through headless Chromium",
    )

    parser.add_argument("input", nargs="?", help="Input HTML file")
    parser.add_argument("-o", "--output", help="Output PDF (default: input with .pdf)")
    parser.add_argument("--config", help="Path to config YAML")

    # ---- PAGE ----
    parser.add_argument("--format", help="Paper format (letter, a0-a6, legal, tabloid, ledger)")
    parser.add_argument("--width", type=float, help="Paper width (in --unit)")
    parser.add_argument("--height", type=float, help="Paper height (in --unit)")
    parser.add_argument("--landscape", action="store_true")
    parser.add_argument(
        "--margins", type=float, nargs=4, metavar=("TOP", "RIGHT", "BOTTOM", "LEFT"),
    )
    parser.add_argument("--unit", help="Unit for sizes and margins: px, in, cm, mm")
    parser.add_argument("--scale", type=float)
    parser.add_argument("--header", help="Header template HTML")
    parser.add_argument("--footer", help="Footer template HTML")
    parser.add_argument("--page-ranges", help='e.g. "1-5, 8"')
    parser.add_argument("--print-background", action="store_true")
    parser.add_argument("--prefer-css-page-size", action="store_true")
    parser.add_argument("--tagged", action="store_true", help="Generate tagged PDF")
    parser.add_argument("--outline", action="store_true", help="Generate document outline")

    # ---- RENDERING ----
    parser.add_argument("--wait-for", help="Lifecycle event to wait for, e.g. networkIdle")
    parser.add_argument("--emulate-media", help="CSS media type, e.g. print or screen")
    parser.add_argument("--disable-scripts", action="store_true")
    parser.add_argument("--temp-folder")

    # ---- BROWSER ----
    parser.add_argument("--chrome", help="Chrome / Chromium executable")
    parser.add_argument("--chrome-arg", action="append", help="Extra browser argument (repeatable)")
    parser.add_argument("--timeout", type=float, help="Seconds for the whole conversion")
    parser.add_argument("--retries", type=int, default=1, help="Attempts before giving up")

    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"chromepdf v{__version__}")
        return 0

    # ---- LOGGING ----
    log = get_logger(
        "chromepdf",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    if not args.input:
        parser.error("Input file required")

    input_path = Path(args.input)
    if not input_path.exists():
        parser.error(f"Input file not found: {input_path}")

    output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")

    try:
        config = apply_overrides(load_config(args.config), args)
        converter = PdfConverter.from_config(config)
        converter.set_content(input_path.read_text(encoding="utf-8"))

        save = retry(
            times=args.retries,
            delay=1,
            exceptions=(ProtocolError, ConversionTimeoutError),
        )(converter.save)
        save(output_path)

    except (ChromePdfError, FileNotFoundError, ValueError) as exc:
        log.error("Conversion failed: %s", exc)
        return 1

    print(f"✅ PDF generated: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
