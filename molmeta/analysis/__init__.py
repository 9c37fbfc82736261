"""molmeta.analysis — symmetry, axis and entity summaries of loaded structures.

Architecture:
    - symmetry.py: model_symmetry extraction (space group, cell angles)
    - axes.py: axis-system classification, orthogonalization codes
    - entities.py: chain / ligand classification over three table layouts
    - summary.py: human-readable strings
    - engine.py: summarize() — all four outputs for one (model, structures) pair

Usage::

    from molmeta.analysis import summarize

    s = summarize(model, structures)
    print(s.label, s.spacegroup, s.ortho_code)
    print(s.analysis)  # "2 amino acid chains and 1 ligands in ASU"
"""

from molmeta.analysis.symmetry import (
    SymmetryMetadata,
    cell_angles_degrees,
    extract_symmetry,
    simplified_spacegroup_name,
)
from molmeta.analysis.axes import AxisSystem, ORTHO_CODES, classify_axis_system, orthogonalization_code
from molmeta.analysis.entities import (
    ClassificationResult,
    EntityLayout,
    EntityRow,
    classify,
    detect_layout,
    iter_entity_rows,
)
from molmeta.analysis.summary import format_analysis, format_label
from molmeta.analysis.engine import StructureSummary, summarize

__all__ = [
    # Symmetry
    "SymmetryMetadata",
    "extract_symmetry",
    "cell_angles_degrees",
    "simplified_spacegroup_name",
    # Axes
    "AxisSystem",
    "ORTHO_CODES",
    "classify_axis_system",
    "orthogonalization_code",
    # Entities
    "ClassificationResult",
    "EntityLayout",
    "EntityRow",
    "classify",
    "detect_layout",
    "iter_entity_rows",
    # Formatting
    "format_analysis",
    "format_label",
    # Engine
    "StructureSummary",
    "summarize",
]
