from __future__ import annotations

import logging
from typing import List, Optional, Union

from flask import request
from pydantic import BaseModel, Field, ValidationError

from arithmos.services.gematria import (
    list_available_methods,
    parse_selection,
    selection_names,
    toggle,
)

LOGGER = logging.getLogger(__name__)


class MethodDTO(BaseModel):
    key: str
    label: str
    description: str
    bit: int
    selected: bool = False


class MethodsResponse(BaseModel):
    methods: List[MethodDTO] = Field(default_factory=list)
    selection: List[str] = Field(default_factory=list)
    bits: int = 0


class ToggleRequest(BaseModel):
    selection: Union[List[str], str, None] = None
    method: Union[List[str], str]


class SelectionResponse(BaseModel):
    selection: List[str] = Field(default_factory=list)
    bits: int = 0


def list_methods() -> tuple[dict, int]:
    raw: Optional[str] = request.args.get("selection")
    try:
        selection = parse_selection(raw)
    except ValueError as exc:
        LOGGER.info("Rejected method listing: %s", exc)
        return {"error": str(exc)}, 400

    payload = MethodsResponse(
        methods=[MethodDTO(**entry) for entry in list_available_methods(selection)],
        selection=selection_names(selection),
        bits=int(selection),
    )
    return payload.model_dump(), 200


def toggle_method() -> tuple[dict, int]:
    """Flip the requested method bits in the submitted selection."""
    try:
        body = ToggleRequest.model_validate(request.get_json(silent=True) or {})
        current = parse_selection(body.selection)
        method = parse_selection(body.method)
    except (ValidationError, ValueError) as exc:
        LOGGER.info("Rejected toggle request: %s", exc)
        return {"error": str(exc)}, 400

    updated = toggle(current, method)
    payload = SelectionResponse(selection=selection_names(updated), bits=int(updated))
    return payload.model_dump(), 200


__all__ = [
    "MethodDTO",
    "MethodsResponse",
    "SelectionResponse",
    "ToggleRequest",
    "list_methods",
    "toggle_method",
]
