from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd

from molmeta.analysis.engine import StructureSummary

COLUMNS = ["name", "label", "spacegroup", "ortho_code", "num_chains", "num_ligands", "analysis"]


@dataclass(frozen=True)
class SummaryReport:
    """A table of structure summaries.

    Convention:
      - one row per summarized snapshot
      - `name` identifies the snapshot (usually its file stem)
    """

    df: pd.DataFrame

    @staticmethod
    def from_summaries(items: Iterable[tuple[str, StructureSummary]]) -> "SummaryReport":
        rows = [{"name": name, **summary.to_dict()} for name, summary in items]
        return SummaryReport(pd.DataFrame(rows, columns=COLUMNS))

    def save_parquet(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.df.to_parquet(path, index=False)

    def save_csv(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.df.to_csv(path, index=False)

    def save(self, path: Path) -> None:
        """Write CSV when the suffix is .csv, parquet otherwise."""
        if path.suffix.lower() == ".csv":
            self.save_csv(path)
        else:
            self.save_parquet(path)

    @staticmethod
    def load_parquet(path: Path) -> "SummaryReport":
        return SummaryReport(pd.read_parquet(path))

    def count(self) -> int:
        return int(len(self.df))

    def totals(self) -> dict[str, int]:
        if self.df.empty:
            return {"num_chains": 0, "num_ligands": 0}
        return {
            "num_chains": int(self.df["num_chains"].sum()),
            "num_ligands": int(self.df["num_ligands"].sum()),
        }
