"""
Weight unit conversion and display formatting.

Weights are persisted in kilograms. Everything in this module is a pure
presentation transform applied at the boundary: nothing here feeds back into
canonical storage.

Examples:
    >>> to_display(100, WeightUnit.LB)
    220.46226218487757
    >>> format_weight(100, WeightUnit.LB, "en_US", 1)
    '220.5'
    >>> format_weight(1250.5, WeightUnit.KG, "de_DE", 2)
    '1.250,5'
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Tuple


# Conversion constant (exact, by definition of the international pound)
LB_TO_KG = 0.45359237


class WeightUnit(str, Enum):
    """User-facing weight unit preference."""

    KG = "kg"
    LB = "lb"


# language -> (decimal separator, grouping separator)
_SEPARATORS: Dict[str, Tuple[str, str]] = {
    "en": (".", ","),
    "ja": (".", ","),
    "zh": (".", ","),
    "ko": (".", ","),
    "de": (",", "."),
    "es": (",", "."),
    "it": (",", "."),
    "nl": (",", "."),
    "pt": (",", "."),
    "fr": (",", "\u202f"),
    "ru": (",", "\u00a0"),
}


def _language(locale: str) -> str:
    return (locale or "en").replace("-", "_").split("_")[0].lower()


def is_japanese_locale(locale: str) -> bool:
    """True when the locale's language is Japanese."""
    return _language(locale) == "ja"


def to_display(kg: float, unit: WeightUnit) -> float:
    """Convert a canonical kilogram value into the display unit."""
    if unit == WeightUnit.LB:
        return kg / LB_TO_KG
    return kg


def to_kg(display_value: float, unit: WeightUnit) -> float:
    """Convert a value entered in the display unit back to kilograms."""
    if unit == WeightUnit.LB:
        return display_value * LB_TO_KG
    return display_value


def unit_label(unit: WeightUnit) -> str:
    return unit.value


def _format_number(
    value: float,
    max_fraction_digits: int,
    decimal_sep: str,
    group_sep: str,
    grouping: bool,
) -> str:
    try:
        quantum = Decimal(1).scaleb(-max_fraction_digits)
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        return str(value)

    if rounded == 0:
        rounded = abs(rounded)
    sign = "-" if rounded < 0 else ""
    text = format(abs(rounded), "f")
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")

    if grouping and len(whole) > 3:
        groups = []
        while len(whole) > 3:
            groups.insert(0, whole[-3:])
            whole = whole[:-3]
        groups.insert(0, whole)
        whole = group_sep.join(groups)

    if fraction:
        return f"{sign}{whole}{decimal_sep}{fraction}"
    return f"{sign}{whole}"


def format_weight(
    kg: float,
    unit: WeightUnit,
    locale: str = "en",
    max_fraction_digits: int = 1,
) -> str:
    """
    Format a canonical weight for display in the given unit and locale.

    Rounds half-to-even to at most ``max_fraction_digits`` and strips trailing
    zeros. Separators follow the locale's language; unknown languages fall
    back to English conventions.

    Args:
        kg: Weight in kilograms
        unit: Display unit
        locale: Locale identifier such as "en_US", "ja-JP" or "de"
        max_fraction_digits: Maximum number of fraction digits to show

    Returns:
        Localized number text without the unit label.
    """
    decimal_sep, group_sep = _SEPARATORS.get(_language(locale), _SEPARATORS["en"])
    return _format_number(
        to_display(kg, unit),
        max_fraction_digits,
        decimal_sep,
        group_sep,
        grouping=True,
    )


def weight_input_text(kg: float, unit: WeightUnit) -> str:
    """
    Text placed into an editable weight field for a stored weight.

    Uses "." and no grouping so the text always parses back as a number.
    """
    return _format_number(to_display(kg, unit), 3, ".", "", grouping=False)
