"""Entity classification across loaded structures.

Each structure wraps a model somewhere inside it, and each model carries an
entity table in one of three layouts:

    COLUMNAR   column store with parallel type / id arrays and a row count
    RECORDS    list of entity records
    KEYED      mapping of key -> entity record (the key may double as the id)

The layout is detected once per table, then a layout-specific extractor
yields uniform EntityRow records which are bucketed into chains and ligands.
Water is never counted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from molmeta.core.logging_utils import get_logger
from molmeta.core.paths import get_path, resolve

logger = get_logger(__name__)

MODEL_PATHS = (
    "cell.obj.data.state.models.0",
    "cell.obj.data.models.0",
    "cell.obj.data",
)

ENTITY_TABLE_PATHS = (
    "entities",
    "sourceData.data.entities",
    "data.entities",
)

# Columnar tables
COLUMN_STORE_PATHS = ("data._columns",)
TYPE_ARRAY_PATHS = (
    "type._array",
    "type.__array",
    "subtype._array",
    "subtype.__array",
    "subtype.valueKind.__array",
)
ID_ARRAY_PATHS = ("data.id._array", "data.id.__array")
ROW_COUNT_PATHS = ("data._rowCount",)

# Record tables
RECORD_TYPE_PATHS = ("type", "data.type.value", "subtype.value")
RECORD_ID_PATHS = ("id", "entryId", "entry")

_SCALARS = (str, bytes, int, float, bool)


class EntityLayout(str, Enum):
    COLUMNAR = "columnar"
    RECORDS = "records"
    KEYED = "keyed"


@dataclass(frozen=True)
class EntityRow:
    entity_id: str
    entity_type: str  # "" when unknown; case-folded for columnar tables


@dataclass(frozen=True)
class ClassificationResult:
    chains: frozenset[str] = field(default_factory=frozenset)
    ligands: frozenset[str] = field(default_factory=frozenset)

    @property
    def num_chains(self) -> int:
        return len(self.chains)

    @property
    def num_ligands(self) -> int:
        return len(self.ligands)


# ----------------------------------------------------------------------
# Type rules
# ----------------------------------------------------------------------

def classify_type(entity_type: str) -> tuple[bool, bool]:
    """Return (is_chain, is_ligand) for an entity type string.

    The "polymer" inside "non-polymer" does not count towards the chain test.
    """
    if not entity_type or "water" in entity_type:
        return False, False
    is_chain = "polypeptide" in entity_type or "polymer" in entity_type.replace("non-polymer", "")
    is_ligand = "non-polymer" in entity_type or "ligand" in entity_type
    return is_chain, is_ligand


def _type_str(value: Any, fold: bool = False) -> str:
    if not isinstance(value, str):
        return ""
    return value.casefold() if fold else value


def _id_str(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


# ----------------------------------------------------------------------
# Layout detection
# ----------------------------------------------------------------------

def _is_record(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALARS)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_array(value: Any) -> bool:
    return _is_sequence(value) or (isinstance(value, np.ndarray) and value.ndim == 1)


def _array_at(path: str):
    def accessor(table: Any) -> Optional[Any]:
        arr = get_path(table, path)
        return arr if _is_array(arr) else None

    return accessor


_TYPE_ARRAY_CANDIDATES = tuple(_array_at(p) for p in TYPE_ARRAY_PATHS)
_ID_ARRAY_CANDIDATES = tuple(_array_at(p) for p in ID_ARRAY_PATHS)


def _type_array(table: Any) -> Optional[Any]:
    return resolve(table, _TYPE_ARRAY_CANDIDATES)


def _row_count(table: Any, default: int) -> int:
    value = resolve(table, ROW_COUNT_PATHS)
    if isinstance(value, bool):
        return default
    if isinstance(value, Integral):
        count = int(value)
    elif isinstance(value, float) and value.is_integer():
        count = int(value)
    else:
        return default
    return count if count >= 0 else default


def detect_layout(table: Any) -> Optional[EntityLayout]:
    """Discriminate the three table layouts, in priority order."""
    if table is None or isinstance(table, _SCALARS):
        return None
    if resolve(table, COLUMN_STORE_PATHS) is not None and _type_array(table) is not None:
        return EntityLayout.COLUMNAR
    if _is_sequence(table):
        return EntityLayout.RECORDS
    if isinstance(table, Mapping) or hasattr(table, "__dict__"):
        return EntityLayout.KEYED
    return None


# ----------------------------------------------------------------------
# Row extractors
# ----------------------------------------------------------------------

def _columnar_rows(table: Any) -> Iterator[EntityRow]:
    types = _type_array(table)
    if types is None:
        types = []
    ids = resolve(table, _ID_ARRAY_CANDIDATES)
    if ids is None:
        ids = []
    row_count = _row_count(table, default=len(types))

    for i in range(row_count):
        entity_type = _type_str(types[i], fold=True) if i < len(types) else ""
        raw_id = ids[i] if i < len(ids) else None
        entity_id = _id_str(raw_id) if raw_id is not None else str(i + 1)
        yield EntityRow(entity_id=entity_id, entity_type=entity_type)


def _record_type(record: Any) -> str:
    return _type_str(resolve(record, RECORD_TYPE_PATHS))


def _record_rows(table: Any) -> Iterator[EntityRow]:
    for record in table:
        raw_id = resolve(record, RECORD_ID_PATHS)
        yield EntityRow(
            entity_id=_id_str(raw_id) if raw_id is not None else "unknown",
            entity_type=_record_type(record),
        )


def _keyed_items(table: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(table, Mapping):
        return table.items()
    return vars(table).items()


def _keyed_rows(table: Any) -> Iterator[EntityRow]:
    for key, record in _keyed_items(table):
        if not _is_record(record):
            continue
        raw_id = resolve(record, RECORD_ID_PATHS[:2])
        yield EntityRow(
            entity_id=_id_str(raw_id if raw_id is not None else key),
            entity_type=_record_type(record),
        )


_EXTRACTORS = {
    EntityLayout.COLUMNAR: _columnar_rows,
    EntityLayout.RECORDS: _record_rows,
    EntityLayout.KEYED: _keyed_rows,
}


def iter_entity_rows(table: Any, layout: Optional[EntityLayout] = None) -> Iterator[EntityRow]:
    """Yield uniform rows from an entity table of any supported layout."""
    layout = layout or detect_layout(table)
    if layout is None:
        return iter(())
    return _EXTRACTORS[layout](table)


# ----------------------------------------------------------------------
# Structure traversal
# ----------------------------------------------------------------------

def resolve_model(structure: Any) -> Optional[Any]:
    return resolve(structure, MODEL_PATHS)


def resolve_entity_table(model: Any) -> Optional[Any]:
    return resolve(model, ENTITY_TABLE_PATHS)


def classify(structures: Iterable[Any]) -> ClassificationResult:
    """Partition entity ids of every structure into chains and ligands."""
    chains: set[str] = set()
    ligands: set[str] = set()

    for n, structure in enumerate(structures):
        model = resolve_model(structure)
        if model is None:
            logger.debug("Structure #%d: no model found, skipping", n)
            continue
        table = resolve_entity_table(model)
        layout = detect_layout(table)
        if layout is None:
            logger.debug("Structure #%d: no entity table found, skipping", n)
            continue

        exclusive = layout is EntityLayout.COLUMNAR
        for row in iter_entity_rows(table, layout):
            is_chain, is_ligand = classify_type(row.entity_type)
            if is_chain:
                chains.add(row.entity_id)
            if is_ligand and not (exclusive and is_chain):
                ligands.add(row.entity_id)

    return ClassificationResult(chains=frozenset(chains), ligands=frozenset(ligands))
