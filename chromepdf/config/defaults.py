DEFAULT_CONFIG = {
    # -----------------------------
    # PAGE SETUP
    # -----------------------------
    "pdf": {
        "paper_format": None,       # letter | a0-a6 | legal | tabloid | ledger
        "paper_width": None,        # overrides paper_format when set
        "paper_height": None,
        "orientation": "portrait",  # portrait | landscape
        "margins": None,            # [top, right, bottom, left]
        "unit": "in",               # px | in | cm | mm
        "scale": 1,
        "header": None,
        "footer": None,
        "display_header_footer": False,
        "prefer_css_page_size": False,
        "print_background": False,
        "generate_tagged_pdf": False,
        "generate_document_outline": False,
        "page_ranges": None,
    },

    # -----------------------------
    # BROWSER
    # -----------------------------
    "browser": {
        "executable_path": None,    # None = Playwright bundled Chromium
        "args": [],
        "headless": True,
        "timeout": 10,              # seconds, whole conversion
    },

    # -----------------------------
    # RENDERING
    # -----------------------------
    "render": {
        "temp_folder": None,        # None = OS temp dir
        "wait_for_lifecycle_event": None,
        "disable_script_execution": False,
        "emulate_media": None,      # screen | print
    },
}
