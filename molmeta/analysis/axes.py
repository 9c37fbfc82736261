"""Crystal axis-system classification and orthogonalization codes.

A unit cell is classified only from its three angles (alpha, beta, gamma).
In a monoclinic cell exactly one angle departs from 90 degrees; the axis
orthogonal to the other two is the unique axis, and the orthogonalization
code stars the reciprocal axis that gets aligned with the Cartesian frame:

    alpha != 90  -> a-unique  -> A*/X0
    beta  != 90  -> b-unique  -> C*/Z0   (most common setting)
    gamma != 90  -> c-unique  -> B*/Y0

Everything else (all right angles, or two or more oblique angles) gets the
neutral code.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

import numpy as np

from molmeta.analysis.symmetry import SymmetryMetadata, cell_angles_degrees
from molmeta.config import DEFAULT_NEAR90_TOLERANCE
from molmeta.core.paths import first_not_none

NEUTRAL_CODE = "(#1) A/X0, B/Y0, C/Z0"


class AxisSystem(str, Enum):
    ORTHOGONAL = "orthogonal"  # orthorhombic / tetragonal / cubic
    MONOCLINIC_A = "monoclinic-a"
    MONOCLINIC_B = "monoclinic-b"
    MONOCLINIC_C = "monoclinic-c"
    TRICLINIC = "triclinic"


ORTHO_CODES: dict[AxisSystem, str] = {
    AxisSystem.MONOCLINIC_A: "(#1) A*/X0, B/Y0, C/Z0",
    AxisSystem.MONOCLINIC_B: "(#1) A/X0, B/Y0, C*/Z0",
    AxisSystem.MONOCLINIC_C: "(#1) A/X0, B*/Y0, C/Z0",
    AxisSystem.ORTHOGONAL: NEUTRAL_CODE,
    AxisSystem.TRICLINIC: NEUTRAL_CODE,
}


def near90(angles_deg: Sequence[float], tolerance: float = DEFAULT_NEAR90_TOLERANCE) -> np.ndarray:
    """Element-wise |x - 90| < tolerance."""
    return np.abs(np.asarray(angles_deg, dtype=float) - 90.0) < tolerance


def classify_axis_system(
    angles_deg: Sequence[float],
    tolerance: float = DEFAULT_NEAR90_TOLERANCE,
) -> AxisSystem:
    """Classify (alpha, beta, gamma) in degrees."""
    alpha, beta, gamma = (bool(v) for v in near90(angles_deg, tolerance))
    if not alpha and beta and gamma:
        return AxisSystem.MONOCLINIC_A
    if not beta and alpha and gamma:
        return AxisSystem.MONOCLINIC_B
    if not gamma and alpha and beta:
        return AxisSystem.MONOCLINIC_C
    if alpha and beta and gamma:
        return AxisSystem.ORTHOGONAL
    return AxisSystem.TRICLINIC


def explicit_code(meta: Optional[SymmetryMetadata]) -> str:
    """Pre-computed code from the record.

    The first legacy field that is present wins, even when it is empty.
    """
    if meta is None:
        return ""
    return first_not_none(meta.to_orthogonal_axes, meta.to_orthogonal) or ""


def orthogonalization_code(
    meta: Optional[SymmetryMetadata],
    tolerance: float = DEFAULT_NEAR90_TOLERANCE,
) -> str:
    """Orthogonalization axis code for a symmetry record.

    An explicit code on the record is returned verbatim. Otherwise the code
    is derived from the cell angles, and "" is returned when there are none.
    """
    code = explicit_code(meta)
    if code:
        return code
    angles = cell_angles_degrees(meta)
    if angles is None:
        return ""
    return ORTHO_CODES[classify_axis_system(angles, tolerance)]
