"""
Display text for numbers.

The display shows the shortest text that round-trips to the same float,
laid out the way ECMAScript's ``Number.prototype.toString`` does it:
positional notation for decimal exponents from -6 up to 20, and
``d.ddde±n`` outside that window. Python's ``repr`` switches to exponents
much earlier (1e16), which would make long integers flip notation halfway
across the display.
"""

from __future__ import annotations

import re
from decimal import Decimal

from keycalc.config import DEFAULT_CONFIG, FormatConfig
from keycalc.exceptions import InvalidInputError
from keycalc.validators import validate_number

# Longest numeric prefix, as accepted by a lenient number parser.
_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_MAX_POSITIONAL_EXPONENT = 21
_MIN_POSITIONAL_EXPONENT = -6


def to_plain_text(value: float) -> str:
    """
    Render a finite float as its shortest round-tripping text.

    Args:
        value: A finite number

    Returns:
        Text such as ``"12"``, ``"0.5"``, ``"1e+21"`` or ``"1.5e-7"``

    Raises:
        InvalidInputError: If value is NaN or infinite
    """
    validate_number(value)
    value = float(value)

    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    shortest = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, shortest.digits))
    k = len(digits)
    # Decimal point position relative to the first digit.
    n = k + shortest.exponent

    if k <= n <= _MAX_POSITIONAL_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_POSITIONAL_EXPONENT:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_POSITIONAL_EXPONENT < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        exponent = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"

    return sign + body


def format_number(value: float, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """
    Format a result for the display.

    Large magnitudes are first squeezed through a bounded exponential form,
    and text that is still too wide is re-rendered at reduced precision.
    With the default thresholds formatting is idempotent:
    ``format_number(parse_display(s)) == s`` for any ``s`` it returns.

    Args:
        value: A finite number
        config: Width thresholds

    Returns:
        Display text

    Raises:
        InvalidInputError: If value is NaN or infinite
    """
    validate_number(value)
    value = float(value)

    if abs(value) < config.exponential_threshold:
        text = to_plain_text(value)
    else:
        text = f"{value:.{config.exponent_digits}e}"

    cleaned = to_plain_text(float(text))

    if len(cleaned) > config.max_display_length:
        return to_plain_text(float(f"{value:.{config.reduced_precision}g}"))

    return cleaned


def parse_display(text: str) -> float:
    """
    Parse the numeric prefix of display text.

    Trailing characters that cannot extend the number are ignored, so
    partially typed values parse: ``"5."`` is 5.0 and ``"1.5e-"`` is 1.5.

    Raises:
        InvalidInputError: If the text does not start with a number
    """
    match = _NUMERIC_PREFIX.match(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidInputError(text, "Display text is not a number")
    return float(match.group())
