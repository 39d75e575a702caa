"""Character value table loaded from the bundled ``character_values.csv``."""

from __future__ import annotations

import csv
import hashlib
import io
import logging
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .methods import SINGLE_METHODS, CalculationMethod, is_single

LOGGER = logging.getLogger(__name__)

DATA_PACKAGE = "arithmos.services.gematria"
DATA_FILE = "character_values.csv"
HEADER: Tuple[str, ...] = ("character", "script") + tuple(method.name for method in SINGLE_METHODS)
_METHOD_INDEX: Dict[CalculationMethod, int] = {method: index for index, method in enumerate(SINGLE_METHODS)}


class Script(str, Enum):
    LATIN = "latin"
    GREEK = "greek"
    HEBREW = "hebrew"


# Scripts for which a method defines real values; other scripts carry zero.
METHOD_SCRIPTS: Mapping[CalculationMethod, frozenset] = MappingProxyType(
    {
        CalculationMethod.Gematria: frozenset(Script),
        CalculationMethod.Ordinal: frozenset(Script),
        CalculationMethod.Reduced: frozenset(Script),
        CalculationMethod.Sumerian: frozenset({Script.LATIN}),
        CalculationMethod.Primes: frozenset(Script),
        CalculationMethod.Squared: frozenset(Script),
        CalculationMethod.MisparGadol: frozenset({Script.HEBREW}),
        CalculationMethod.MisparShemi: frozenset({Script.HEBREW}),
    }
)


class TableFormatError(ValueError):
    """Raised when the character value data file is malformed."""


@dataclass(frozen=True)
class CharacterValueRecord:
    """Values of one character under every calculation method."""

    character: str
    script: Script
    gematria: int
    ordinal: int
    reduced: int
    sumerian: int
    primes: int
    squared: int
    mispar_gadol: int
    mispar_shemi: int

    def value(self, method: CalculationMethod) -> int:
        """Return the value for a single ``method``."""

        if not is_single(method):
            raise ValueError("record values are indexed by exactly one calculation method")
        return self.values()[_METHOD_INDEX[CalculationMethod(method)]]

    def as_dict(self) -> Dict[CalculationMethod, int]:
        return dict(zip(SINGLE_METHODS, self.values()))

    def values(self) -> Tuple[int, ...]:
        return (
            self.gematria,
            self.ordinal,
            self.reduced,
            self.sumerian,
            self.primes,
            self.squared,
            self.mispar_gadol,
            self.mispar_shemi,
        )


def _parse_cell(raw: str, *, line: int, column: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise TableFormatError(f"line {line}: {column} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise TableFormatError(f"line {line}: {column} must not be negative")
    return value


def parse_table(text: str) -> Dict[str, CharacterValueRecord]:
    """Parse CSV ``text`` into an ordered mapping of character to record."""

    reader = csv.reader(io.StringIO(text))
    try:
        header = tuple(next(reader))
    except StopIteration as exc:
        raise TableFormatError("character value table is empty") from exc
    if header != HEADER:
        raise TableFormatError(f"unexpected header {header!r}")

    records: Dict[str, CharacterValueRecord] = {}
    for line, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(HEADER):
            raise TableFormatError(f"line {line}: expected {len(HEADER)} columns, got {len(row)}")
        character, script_name = row[0], row[1]
        if len(character) != 1:
            raise TableFormatError(f"line {line}: key must be a single character, got {character!r}")
        if character in records:
            raise TableFormatError(f"line {line}: duplicate character {character!r}")
        try:
            script = Script(script_name)
        except ValueError as exc:
            raise TableFormatError(f"line {line}: unknown script {script_name!r}") from exc
        values = [
            _parse_cell(raw, line=line, column=column)
            for raw, column in zip(row[2:], HEADER[2:])
        ]
        records[character] = CharacterValueRecord(character, script, *values)
    return records


def render_table(records: Mapping[str, CharacterValueRecord]) -> str:
    """Render ``records`` back into the canonical CSV form."""

    lines = [",".join(HEADER)]
    for character, record in records.items():
        cells = [character, record.script.value] + [str(value) for value in record.values()]
        lines.append(",".join(cells))
    return "\n".join(lines) + "\n"


def _load() -> Mapping[str, CharacterValueRecord]:
    raw = (resources.files(DATA_PACKAGE) / "data" / DATA_FILE).read_text(encoding="utf-8")
    records = parse_table(raw)
    LOGGER.debug("Loaded %d character value records", len(records))
    return MappingProxyType(records)


CHARACTER_VALUES: Mapping[str, CharacterValueRecord] = _load()


def lookup(character: str) -> Optional[CharacterValueRecord]:
    """Return the record for ``character`` or ``None`` when unsupported."""

    return CHARACTER_VALUES.get(character)


def iter_records() -> Iterator[Tuple[str, CharacterValueRecord]]:
    return iter(CHARACTER_VALUES.items())


def characters(script: Optional[Script] = None) -> List[str]:
    """Return supported characters in table order, optionally for one script."""

    return [
        character
        for character, record in CHARACTER_VALUES.items()
        if script is None or record.script is script
    ]


def is_applicable(character: str, method: CalculationMethod) -> bool:
    """Return whether ``method`` defines values for the script of ``character``.

    A zero from :func:`lookup` is a real value only when this returns ``True``.
    """

    record = lookup(character)
    if record is None or not is_single(method):
        return False
    return record.script in METHOD_SCRIPTS[CalculationMethod(method)]


def table_checksum() -> str:
    """Return the SHA-256 hex digest of the canonical table rendering."""

    return hashlib.sha256(render_table(CHARACTER_VALUES).encode("utf-8")).hexdigest()


__all__ = [
    "CHARACTER_VALUES",
    "CharacterValueRecord",
    "METHOD_SCRIPTS",
    "Script",
    "TableFormatError",
    "characters",
    "is_applicable",
    "iter_records",
    "lookup",
    "parse_table",
    "render_table",
    "table_checksum",
]
