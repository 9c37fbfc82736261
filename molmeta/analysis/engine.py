"""One-shot derivation of every summary value for a (model, structures) pair.

Pure: reads its inputs once, mutates nothing, keeps no state. Hosts call
``summarize`` again on every load and push the result to their own UI.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

from molmeta.analysis.axes import orthogonalization_code
from molmeta.analysis.entities import classify
from molmeta.analysis.summary import format_analysis, format_label
from molmeta.analysis.symmetry import extract_symmetry, simplified_spacegroup_name
from molmeta.config import MolmetaSettings


@dataclass(frozen=True)
class StructureSummary:
    label: str
    spacegroup: str
    ortho_code: str
    analysis: str
    num_chains: int = 0
    num_ligands: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(
    model: Any,
    structures: Optional[Iterable[Any]] = None,
    settings: Optional[MolmetaSettings] = None,
) -> StructureSummary:
    """Derive label, space group, orthogonalization code and composition."""
    s = settings or MolmetaSettings()
    meta = extract_symmetry(model) if model is not None else None
    result = classify(structures or ())
    return StructureSummary(
        label=format_label(model, default=s.unknown_label),
        spacegroup=simplified_spacegroup_name(meta),
        ortho_code=orthogonalization_code(meta, tolerance=s.near90_tolerance),
        analysis=format_analysis(result),
        num_chains=result.num_chains,
        num_ligands=result.num_ligands,
    )
