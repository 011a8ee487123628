from .errors import InvalidUnitError

# Pixels per unit, 96 px == 1 in (same table puppeteer uses)
UNIT_TO_PIXELS = {
    "px": 1,
    "in": 96,
    "cm": 37.8,
    "mm": 3.78,
}


def to_inches(value: float, unit: str = "in") -> float:
    """
    Convert a length expressed in `unit` to inches.

    Raises InvalidUnitError for anything outside UNIT_TO_PIXELS
    (matched case-insensitively).
    """
    key = str(unit).lower()

    if key not in UNIT_TO_PIXELS:
        raise InvalidUnitError(unit)

    return (value * UNIT_TO_PIXELS[key]) / 96
