"""Text to value reduction over the character value table."""

from __future__ import annotations

from typing import Iterable

from .methods import CalculationMethod, is_single
from .table import lookup


class InvalidMethodError(ValueError):
    """Raised when a value request does not name exactly one method."""


def compute_value(normalized_text: Iterable[str], method: CalculationMethod) -> int:
    """Return the total value of ``normalized_text`` under one ``method``.

    Characters missing from the table contribute zero. The text is expected
    to be normalized already (upper case Latin and Greek letters, Hebrew
    letters); no case folding happens here.
    """

    if not is_single(method):
        raise InvalidMethodError("a single value request must name exactly one calculation method")

    total = 0
    for character in normalized_text:
        record = lookup(character)
        if record is not None:
            total += record.value(method)
    return total


__all__ = ["InvalidMethodError", "compute_value"]
