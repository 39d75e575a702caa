from __future__ import annotations

import logging
from typing import Dict, List, Union

from flask import current_app, request
from prometheus_client import Counter
from pydantic import BaseModel, Field, ValidationError

from arithmos.services.gematria import (
    CalculationMethod,
    compute_value,
    iter_methods,
    parse_selection,
    selection_names,
)

LOGGER = logging.getLogger(__name__)

VALUES_COMPUTED = Counter(
    "arithmos_values_computed_total", "Values computed through the API", ["method"]
)


class ValuesRequest(BaseModel):
    text: str = ""
    methods: Union[List[str], str, None] = None


class ValuesResponse(BaseModel):
    text: str
    values: Dict[str, int] = Field(default_factory=dict)
    selection: List[str] = Field(default_factory=list)


def _read_request() -> ValuesRequest:
    if request.method == "POST":
        return ValuesRequest.model_validate(request.get_json(silent=True) or {})
    return ValuesRequest(
        text=request.args.get("text", ""),
        methods=request.args.get("methods"),
    )


def resolve_selection(raw: Union[List[str], str, None]) -> CalculationMethod:
    """Return the requested selection, falling back to the configured default."""
    if raw is None:
        raw = current_app.config.get("ARITHMOS_DEFAULT_METHODS") or ""
    return parse_selection(raw)


def compute_values(text: str, selection: CalculationMethod) -> Dict[str, int]:
    """Compute one total per method in ``selection``."""
    values: Dict[str, int] = {}
    for method in iter_methods(selection):
        values[method.name] = compute_value(text, method)
        VALUES_COMPUTED.labels(method.name).inc()
    return values


def get_values() -> tuple[dict, int]:
    try:
        body = _read_request()
        selection = resolve_selection(body.methods)
    except (ValidationError, ValueError) as exc:
        LOGGER.info("Rejected value request: %s", exc)
        return {"error": str(exc)}, 400

    max_length = current_app.config.get("ARITHMOS_MAX_TEXT_LENGTH") or 0
    if max_length and len(body.text) > max_length:
        LOGGER.info("Rejected value request: text length %d", len(body.text))
        return {"error": f"text must not exceed {max_length} characters"}, 400

    payload = ValuesResponse(
        text=body.text,
        values=compute_values(body.text, selection),
        selection=selection_names(selection),
    )
    return payload.model_dump(), 200


__all__ = [
    "ValuesRequest",
    "ValuesResponse",
    "compute_values",
    "get_values",
    "resolve_selection",
]
