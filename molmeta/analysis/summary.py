"""Human-readable renderings of derived values."""

from __future__ import annotations

from typing import Any

from molmeta.analysis.entities import ClassificationResult
from molmeta.config import DEFAULT_UNKNOWN_LABEL
from molmeta.core.paths import resolve

LABEL_PATHS = ("label", "entryId")


def format_analysis(result: ClassificationResult) -> str:
    # No plural correction: "1 ligands" is the expected rendering.
    return f"{result.num_chains} amino acid chains and {result.num_ligands} ligands in ASU"


def format_label(model: Any, default: str = DEFAULT_UNKNOWN_LABEL) -> str:
    """Model label, else its entryId, else ``default``."""
    value = resolve(model, LABEL_PATHS)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)
