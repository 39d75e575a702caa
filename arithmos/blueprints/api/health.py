from pydantic import BaseModel

from arithmos.services.gematria import CHARACTER_VALUES, SINGLE_METHODS, table_checksum


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = "ok"
    characters: int
    methods: int
    table_checksum: str


def health() -> tuple[dict, int]:
    """Return application health along with the loaded table fingerprint."""
    payload = HealthResponse(
        characters=len(CHARACTER_VALUES),
        methods=len(SINGLE_METHODS),
        table_checksum=table_checksum(),
    )
    return payload.model_dump(), 200


__all__ = ["HealthResponse", "health"]
