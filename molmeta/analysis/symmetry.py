"""Model symmetry record: extraction and derived accessors.

The symmetry record lives at a stable location inside the model's static
property store; only its presence is optional. Every accessor tolerates a
missing record and returns a neutral default.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from molmeta.core.logging_utils import get_logger
from molmeta.core.paths import get_path

logger = get_logger(__name__)

SYMMETRY_PATH = "_staticPropertyData.model_symmetry"


@dataclass(frozen=True)
class SymmetryMetadata:
    """Normalized view of a model_symmetry record."""

    spacegroup_name: Optional[str] = None
    to_orthogonal_axes: Optional[str] = None
    to_orthogonal: Optional[str] = None
    # (alpha, beta, gamma); None unless exactly three numbers were present
    cell_angles_radians: Optional[tuple[float, float, float]] = None
    raw: Any = field(default=None, repr=False, compare=False)


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _angles(value: Any) -> Optional[tuple[float, float, float]]:
    if value is None or isinstance(value, (str, bytes, Mapping)):
        return None
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError):
        return None
    if arr.shape != (3,):
        return None
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def from_record(record: Any) -> SymmetryMetadata:
    """Normalize a raw model_symmetry record of any shape."""
    return SymmetryMetadata(
        spacegroup_name=_opt_str(get_path(record, "spacegroup.name")),
        to_orthogonal_axes=_opt_str(get_path(record, "spacegroup.to_orthogonal_axes")),
        to_orthogonal=_opt_str(get_path(record, "spacegroup.to_orthogonal")),
        cell_angles_radians=_angles(get_path(record, "spacegroup.cell.anglesInRadians")),
        raw=record,
    )


def extract_symmetry(model: Any) -> Optional[SymmetryMetadata]:
    """Pull the model symmetry record out of a model object, or None."""
    record = get_path(model, SYMMETRY_PATH)
    if record is None:
        logger.debug("No symmetry record on model %r", type(model).__name__)
        return None
    return from_record(record)


def cell_angles_degrees(meta: Optional[SymmetryMetadata]) -> Optional[tuple[float, float, float]]:
    if meta is None or meta.cell_angles_radians is None:
        return None
    alpha, beta, gamma = np.degrees(meta.cell_angles_radians)
    return (float(alpha), float(beta), float(gamma))


def simplified_spacegroup_name(meta: Optional[SymmetryMetadata]) -> str:
    if meta is None or meta.spacegroup_name is None:
        return ""
    return meta.spacegroup_name.strip()
