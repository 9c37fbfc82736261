"""Tests for the molmeta CLI."""

import json
import shutil
from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from molmeta.cli import app, load_snapshot

FIXTURES = Path(__file__).resolve().parent / "fixtures"

runner = CliRunner()


def test_load_snapshot():
    model, structures = load_snapshot(FIXTURES / "snapshot_1abc.json")
    assert model["label"] == "1ABC"
    assert len(structures) == 2


def test_load_snapshot_not_object(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
        load_snapshot(p)


def test_summarize_text():
    result = runner.invoke(app, ["summarize", str(FIXTURES / "snapshot_1abc.json")])
    assert result.exit_code == 0, result.output
    assert "1ABC" in result.output
    assert "P 1 21 1" in result.output
    assert "(#1) A/X0, B/Y0, C*/Z0" in result.output
    assert "2 amino acid chains and 1 ligands in ASU" in result.output


def test_summarize_json():
    result = runner.invoke(app, ["summarize", str(FIXTURES / "snapshot_empty.json"), "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["label"] == "2XYZ"
    assert data["spacegroup"] == ""
    assert data["ortho_code"] == ""


def test_summarize_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["summarize", str(tmp_path / "nope.json")])
    assert result.exit_code != 0


def test_batch(tmp_path: Path):
    snaps = tmp_path / "snaps"
    snaps.mkdir()
    shutil.copy(FIXTURES / "snapshot_1abc.json", snaps / "one.json")
    shutil.copy(FIXTURES / "snapshot_empty.json", snaps / "two.json")
    (snaps / "broken.json").write_text("{not json")
    out = tmp_path / "report.csv"

    result = runner.invoke(app, ["batch", str(snaps), "--out", str(out)])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(out, keep_default_na=False)
    assert df["name"].tolist() == ["one", "two"]
    assert df["num_chains"].tolist() == [2, 0]
    assert df["spacegroup"].tolist() == ["P 1 21 1", ""]
