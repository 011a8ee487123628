from typing import Dict, Tuple

from .errors import UnknownPaperFormatError

# (width, height) in inches
PAPER_FORMATS: Dict[str, Tuple[float, float]] = {
    "letter": (8.5, 11),
    "a0": (33.1, 46.8),
    "a1": (23.4, 33.1),
    "a2": (16.54, 23.4),
    "a3": (11.7, 16.54),
    "a4": (8.27, 11.7),
    "a5": (5.83, 8.27),
    "a6": (4.13, 5.83),
    "legal": (8.5, 14),
    "tabloid": (11, 17),
    "ledger": (17, 11),
}


def get_paper_size(name: str) -> Tuple[float, float]:
    key = str(name).lower()

    if key not in PAPER_FORMATS:
        raise UnknownPaperFormatError(key)

    return PAPER_FORMATS[key]
