#!/usr/bin/env python3
"""Summarize viewer snapshots and print a per-snapshot table.

Each snapshot is a JSON file holding {"model": ..., "structures": [...]},
as dumped by the viewer after a file load.

Usage:
    python examples/summarize_snapshots.py --input snapshots/ --output reports/summary.parquet
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from molmeta.cli import load_snapshot
from molmeta.config import load_settings
from molmeta.core.report import SummaryReport
from molmeta.state import ViewerState

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    p = argparse.ArgumentParser(description="Summarize viewer snapshots")
    p.add_argument("--input", required=True, help="Directory of snapshot JSON files")
    p.add_argument("--output", default=None, help="Optional report path (.parquet or .csv)")
    args = p.parse_args()

    state = ViewerState(load_settings())
    state.subscribe(lambda s: logger.info("%s | %s | %s | %s", s.label, s.spacegroup, s.ortho_code, s.analysis))

    items = []
    for path in sorted(Path(args.input).glob("*.json")):
        model, structures = load_snapshot(path)
        items.append((path.stem, state.load(model, structures)))

    report = SummaryReport.from_summaries(items)
    print(report.df.to_string(index=False))

    if args.output:
        out = Path(args.output)
        report.save(out)
        logger.info("Report saved to %s (%d rows)", out, report.count())


if __name__ == "__main__":
    main()
