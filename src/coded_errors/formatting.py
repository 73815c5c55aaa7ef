"""Positional template formatting and value inspection for error messages.

Templates use printf-like placeholders:

    %s  str(value)
    %d  numeric conversion
    %i  leading integer
    %f  leading float
    %j  compact JSON
    %o  inspection, depth 4
    %O  inspection, depth 2
    %%  a literal percent sign (not a placeholder)
"""

import json
import math
import pprint
import re
import sys
from collections.abc import Callable, Sequence

PLACEHOLDER = re.compile(r"%([dfijoOs%])")

INSPECT_MAX_LENGTH = 128

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


def placeholder_kinds(template: str) -> tuple[str, ...]:
    """Return the placeholder kinds of ``template`` in order, skipping ``%%``."""
    return tuple(kind for kind in PLACEHOLDER.findall(template) if kind != "%")


def inspect_value(value: object, *, depth: int = 2) -> str:
    """Render ``value`` on one line, eliding containers nested deeper than ``depth``."""
    return pprint.pformat(value, depth=depth, width=sys.maxsize, sort_dicts=False)


def truncate(text: str, limit: int = INSPECT_MAX_LENGTH) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _to_number(value: object) -> float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _format_decimal(value: object) -> str:
    return _format_number(_to_number(value))


def _format_integer(value: object) -> str:
    match = _LEADING_INT.match(str(value))
    if match is None:
        return "NaN"
    return str(int(match.group(1)))


def _format_float(value: object) -> str:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return _format_number(float(value))
    match = _LEADING_FLOAT.match(str(value))
    if match is None:
        return "NaN"
    return _format_number(float(match.group(1).replace("Infinity", "inf")))


def to_json(value: object) -> str:
    """Compact JSON text of ``value``; values json cannot encode fall back to str()."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except ValueError:
        # json reports circular structures as ValueError
        return "[Circular]"


_FORMATTERS: dict[str, Callable[[object], str]] = {
    "s": str,
    "d": _format_decimal,
    "i": _format_integer,
    "f": _format_float,
    "j": to_json,
    "o": lambda value: inspect_value(value, depth=4),
    "O": lambda value: inspect_value(value, depth=2),
}


def format_template(template: str, args: Sequence[object]) -> str:
    """Substitute ``args`` into the placeholders of ``template``, left to right.

    The caller guarantees that ``args`` holds exactly one value per placeholder.
    """
    values = iter(args)

    def substitute(match: re.Match[str]) -> str:
        kind = match.group(1)
        if kind == "%":
            return "%"
        return _FORMATTERS[kind](next(values))

    return PLACEHOLDER.sub(substitute, template)
