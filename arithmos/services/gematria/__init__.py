"""Gematria computation utilities."""

from __future__ import annotations

from typing import Dict, List

from .engine import InvalidMethodError, compute_value
from .methods import (
    METHOD_DEFINITIONS,
    SINGLE_METHODS,
    CalculationMethod,
    MethodSelection,
    UnknownMethodError,
    describe_methods,
    is_selected,
    is_single,
    iter_methods,
    parse_method,
    parse_selection,
    selection_names,
    toggle,
)
from .table import (
    CHARACTER_VALUES,
    METHOD_SCRIPTS,
    CharacterValueRecord,
    Script,
    TableFormatError,
    characters,
    is_applicable,
    iter_records,
    lookup,
    table_checksum,
)


def list_available_methods(selection: int = CalculationMethod.NONE) -> List[Dict[str, object]]:
    """Return metadata describing every method and whether it is selected."""

    return [
        {
            "key": definition.key,
            "label": definition.label,
            "description": definition.description,
            "bit": int(definition.method),
            "selected": is_selected(selection, definition.method),
        }
        for definition in describe_methods()
    ]


__all__ = [
    "CHARACTER_VALUES",
    "CalculationMethod",
    "CharacterValueRecord",
    "InvalidMethodError",
    "METHOD_DEFINITIONS",
    "METHOD_SCRIPTS",
    "MethodSelection",
    "SINGLE_METHODS",
    "Script",
    "TableFormatError",
    "UnknownMethodError",
    "characters",
    "compute_value",
    "describe_methods",
    "is_applicable",
    "is_selected",
    "is_single",
    "iter_methods",
    "iter_records",
    "list_available_methods",
    "lookup",
    "parse_method",
    "parse_selection",
    "selection_names",
    "table_checksum",
    "toggle",
]
