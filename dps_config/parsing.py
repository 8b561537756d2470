"""
Environment value parsing.

Each helper turns a raw environment string into the field's value, or
``None`` when the input cannot be used. None of them raise: malformed input
simply means "not configured".
"""

import re
from typing import Any, Optional

from dps_config.constants import TRUTHY_TOKEN

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_text(value: Any) -> Optional[str]:
    """Return ``value`` unchanged, or ``None`` for missing/empty input."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        return None
    return value


def parse_flag(value: Any) -> Optional[bool]:
    """
    Parse a boolean flag.

    Only the exact token ``"Y"`` is true. Every other present string
    (``"y"``, ``"yes"``, ``"1"``, ``"true"``) is false. Empty environment
    values never reach this helper: they load as unset, and the getter's
    default (``False``) applies.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    return value == TRUTHY_TOKEN


def parse_unsigned(value: Any, bits: int) -> Optional[int]:
    """
    Parse a base-10 unsigned integer that fits in ``bits`` bits.

    Accepts ASCII digits with an optional leading ``+``; leading zeros are
    ignored. Negative numbers, whitespace, underscores, signs other than
    ``+`` and out-of-range values all yield ``None``.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _UNSIGNED_RE.fullmatch(value):
        digits = value.lstrip("+").lstrip("0") or "0"
        # Longer than the largest value for this width: out of range
        if len(digits) > len(str((1 << bits) - 1)):
            return None
        number = int(digits)
    else:
        return None

    if 0 <= number < (1 << bits):
        return number
    return None
