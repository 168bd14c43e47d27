"""printf-style substitution compatible with the placeholders used in message catalogs.

Supports positional arguments (``%1$s``), flags (``-``, ``+``, space, ``0`` and
``'c`` custom padding), width, precision and the conversions
``b c d e E f F g G o s u x X`` plus the ``%%`` literal.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Any

from dbadmin.exceptions import FormatError

_SPECIFIER = re.compile(
    r"%(?:(?P<argnum>[1-9][0-9]*)\$)?"
    r"(?P<flags>(?:[-+ 0]|'.)*)"
    r"(?P<width>[0-9]+)?"
    r"(?:\.(?P<precision>[0-9]+))?"
    r"(?P<conversion>[bcdeEfFgGosuxX%])"
)

_UNSIGNED_MASK = (1 << 64) - 1


def stringify(value: Any) -> str:
    """String form of a scalar as used by %s.

    Booleans become "1" or "", None becomes "" and floats keep 14
    significant digits ("0.3", "1", "1.0E+20").
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float):
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        text = format(value, ".14G")
        mantissa, sep, exponent = text.partition("E")
        if not sep:
            return text
        if "." not in mantissa:
            mantissa += ".0"
        return f"{mantissa}E{exponent[0]}{int(exponent[1:])}"
    return str(value)


def sprintf(template: str, args: Sequence[Any]) -> str:
    """Substitute args into template.

    Args:
        template: Format string.
        args: Values for the placeholders, in order.

    Returns:
        The formatted string. Surplus arguments are ignored.

    Raises:
        FormatError: On an unknown specifier, a missing argument or a value
            that cannot be converted for a numeric conversion.
    """
    parts: list[str] = []
    pos = 0
    next_arg = 0
    while True:
        idx = template.find("%", pos)
        if idx < 0:
            parts.append(template[pos:])
            break
        parts.append(template[pos:idx])
        match = _SPECIFIER.match(template, idx)
        if match is None:
            raise FormatError(
                f"Unknown format specifier at offset {idx}",
                template=template,
            )
        pos = match.end()
        conversion = match.group("conversion")
        if conversion == "%":
            parts.append("%")
            continue

        argnum = match.group("argnum")
        if argnum is not None:
            index = int(argnum) - 1
        else:
            index = next_arg
            next_arg += 1
        if index >= len(args):
            raise FormatError(
                f"{index + 2} arguments are required, {len(args) + 1} given",
                template=template,
            )
        parts.append(_convert(args[index], match, template))
    return "".join(parts)


def _convert(value: Any, match: re.Match[str], template: str) -> str:
    flags = match.group("flags") or ""
    width = int(match.group("width") or 0)
    precision_raw = match.group("precision")
    precision = int(precision_raw) if precision_raw is not None else None
    conversion = match.group("conversion")

    left = "-" in flags.replace("'-", "")
    plus = "+" in flags.replace("'+", "")
    pad = " "
    i = 0
    while i < len(flags):
        if flags[i] == "'":
            pad = flags[i + 1]
            i += 2
            continue
        if flags[i] == "0":
            pad = "0"
        i += 1

    try:
        if conversion == "s":
            text = stringify(value)
            if precision is not None:
                text = text[:precision]
            signed = False
        elif conversion in "di":
            number = _to_int(value)
            text = str(number)
            if plus and number >= 0:
                text = "+" + text
            signed = True
        elif conversion == "u":
            text = str(_to_int(value) & _UNSIGNED_MASK)
            signed = False
        elif conversion in "fF":
            number_f = _to_float(value)
            text = f"{number_f:.{6 if precision is None else precision}f}"
            if plus and number_f >= 0:
                text = "+" + text
            signed = True
        elif conversion in "eE":
            number_f = _to_float(value)
            text = _exponent(number_f, 6 if precision is None else precision)
            if conversion == "E":
                text = text.upper()
            if plus and number_f >= 0:
                text = "+" + text
            signed = True
        elif conversion in "gG":
            number_f = _to_float(value)
            text = format(number_f, f".{6 if precision is None else max(precision, 1)}{conversion}")
            if plus and number_f >= 0:
                text = "+" + text
            signed = True
        elif conversion == "c":
            return chr(_to_int(value))
        else:
            number = _to_int(value) & _UNSIGNED_MASK
            text = format(number, conversion)
            signed = False
    except (TypeError, ValueError, OverflowError) as exc:
        raise FormatError(
            f"Cannot format {type(value).__name__} value with %{conversion}",
            template=template,
            cause=exc,
        ) from exc

    if len(text) >= width:
        return text
    if left:
        return text.ljust(width, " " if pad == "0" and conversion == "s" else pad)
    if pad == "0" and signed and text[:1] in "+-":
        return text[0] + text[1:].rjust(width - 1, "0")
    return text.rjust(width, pad)


def _to_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return int(float(text))


def _to_float(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    return float(str(value).strip())


def _exponent(number: float, precision: int) -> str:
    """Exponent notation without zero-padding the exponent ('1.5e+3')."""
    mantissa, _, exponent = f"{number:.{precision}e}".partition("e")
    return f"{mantissa}e{'-' if exponent.startswith('-') else '+'}{int(exponent[1:])}"
