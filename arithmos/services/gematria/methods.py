"""Calculation method flags and the selection toggling protocol."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Iterator, List, Tuple


class CalculationMethod(IntFlag):
    """Numbering schemes, one bit each so selections can be combined."""

    NONE = 0
    Gematria = 1
    Ordinal = 2
    Reduced = 4
    Sumerian = 8
    Primes = 16
    Squared = 32
    MisparGadol = 64
    MisparShemi = 128
    ALL = 255


class UnknownMethodError(ValueError):
    """Raised when a serialized method name is not part of the vocabulary."""


@dataclass(frozen=True)
class MethodDefinition:
    """Display metadata for a calculation method."""

    key: str
    label: str
    description: str
    method: CalculationMethod


METHOD_DEFINITIONS: Tuple[MethodDefinition, ...] = (
    MethodDefinition(
        key="Gematria",
        label="Gematria",
        description="Classical alphabetic values 1-9, 10-90, 100-900.",
        method=CalculationMethod.Gematria,
    ),
    MethodDefinition(
        key="Ordinal",
        label="Ordinal",
        description="Position of the letter in its alphabet.",
        method=CalculationMethod.Ordinal,
    ),
    MethodDefinition(
        key="Reduced",
        label="Reduced",
        description="Gematria value reduced to a single digit.",
        method=CalculationMethod.Reduced,
    ),
    MethodDefinition(
        key="Sumerian",
        label="Sumerian",
        description="Latin ordinal value multiplied by 6 (A=6, Z=156).",
        method=CalculationMethod.Sumerian,
    ),
    MethodDefinition(
        key="Primes",
        label="Primes",
        description="The n-th prime number for the n-th letter.",
        method=CalculationMethod.Primes,
    ),
    MethodDefinition(
        key="Squared",
        label="Squared",
        description="Square of the gematria value.",
        method=CalculationMethod.Squared,
    ),
    MethodDefinition(
        key="MisparGadol",
        label="Mispar Gadol",
        description="Hebrew values with final letters counted 500-900.",
        method=CalculationMethod.MisparGadol,
    ),
    MethodDefinition(
        key="MisparShemi",
        label="Mispar Shemi",
        description="Hebrew values of the spelled-out letter names.",
        method=CalculationMethod.MisparShemi,
    ),
)

SINGLE_METHODS: Tuple[CalculationMethod, ...] = tuple(
    definition.method for definition in METHOD_DEFINITIONS
)

_BY_NAME = {definition.key.lower(): definition.method for definition in METHOD_DEFINITIONS}


def is_single(method: int) -> bool:
    """Return ``True`` when ``method`` is exactly one named calculation method."""

    return isinstance(method, int) and not isinstance(method, bool) and method in SINGLE_METHODS


def iter_methods(selection: int) -> Iterator[CalculationMethod]:
    """Yield the single flags present in ``selection`` in bit order."""

    for method in SINGLE_METHODS:
        if selection & method:
            yield method


def parse_method(name: str) -> CalculationMethod:
    """Resolve a single method name, case-insensitively."""

    key = (name or "").strip().lower()
    method = _BY_NAME.get(key)
    if method is None:
        raise UnknownMethodError(f"Unknown calculation method '{name}'")
    return method


def parse_selection(raw: str | Iterable[str] | None) -> CalculationMethod:
    """Build a selection from a comma separated string or a list of names."""

    if raw is None:
        return CalculationMethod.NONE
    tokens = raw.split(",") if isinstance(raw, str) else list(raw)
    selection = CalculationMethod.NONE
    for token in tokens:
        if token is None or not str(token).strip():
            continue
        selection |= parse_method(str(token))
    return selection


def selection_names(selection: int) -> List[str]:
    """Return the vocabulary names of every flag in ``selection``."""

    return [method.name for method in iter_methods(selection)]


def describe_methods() -> List[MethodDefinition]:
    return list(METHOD_DEFINITIONS)


def is_selected(current_selection: int, method: int) -> bool:
    """Return ``True`` when any bit of ``method`` is present in the selection."""

    return (current_selection & method) != 0


def toggle(current_selection: int, method: int) -> CalculationMethod:
    """Return ``current_selection`` with the bits of ``method`` flipped."""

    return CalculationMethod(current_selection ^ method)


class MethodSelection:
    """Caller-owned selection slot that accumulates toggles.

    Toggling reads and writes the current state, so concurrent handlers
    sharing one slot are serialized through a lock.
    """

    def __init__(self, initial: int = CalculationMethod.NONE) -> None:
        self._lock = threading.Lock()
        self._current = CalculationMethod(initial)

    @property
    def current(self) -> CalculationMethod:
        with self._lock:
            return self._current

    def is_selected(self, method: int) -> bool:
        with self._lock:
            return is_selected(self._current, method)

    def toggle(self, method: int) -> CalculationMethod:
        with self._lock:
            self._current = toggle(self._current, method)
            return self._current

    def names(self) -> List[str]:
        return selection_names(self.current)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"MethodSelection({self.names()!r})"


__all__ = [
    "CalculationMethod",
    "METHOD_DEFINITIONS",
    "MethodDefinition",
    "MethodSelection",
    "SINGLE_METHODS",
    "UnknownMethodError",
    "describe_methods",
    "is_selected",
    "is_single",
    "iter_methods",
    "parse_method",
    "parse_selection",
    "selection_names",
    "toggle",
]
