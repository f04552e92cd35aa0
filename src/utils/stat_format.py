from typing import Optional

MISSING = "-"


def to_number(value: Optional[str]) -> Optional[float]:
    """Parse a stat string to a float, or None when missing or not numeric."""
    if value is None:
        return None
    try:
        return float(str(value).strip().rstrip("%"))
    except ValueError:
        return None


def format_percent(value: Optional[str], decimals: int = 1) -> str:
    """'24.25' -> '24.2%'. Whole numbers keep no decimals: '24' -> '24%'."""
    number = to_number(value)
    if number is None:
        return MISSING
    if number.is_integer():
        return f"{int(number)}%"
    return f"{number:.{decimals}f}%"


def abbreviate_count(count: Optional[float]) -> str:
    """142500 -> '142.5k', 2300000 -> '2.3M', 999999 -> '1M', 950 -> '950'."""
    if count is None:
        return MISSING
    count = float(count)
    scaled, suffix = count, ""
    for unit in ("k", "M"):
        # Rounded value decides the unit: 999999 is '1M', not '1000k'
        if abs(round(scaled, 1)) < 1000:
            break
        scaled, suffix = scaled / 1000, unit
    if not suffix:
        return str(int(count)) if count.is_integer() else f"{count:.1f}"
    text = f"{scaled:.1f}".rstrip("0").rstrip(".")
    return f"{text}{suffix}"
