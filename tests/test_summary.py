"""Tests for summary formatting and the one-shot engine."""

import json
import math
from pathlib import Path

import pytest

from molmeta.analysis.engine import StructureSummary, summarize
from molmeta.analysis.entities import ClassificationResult
from molmeta.analysis.summary import format_analysis, format_label
from molmeta.config import MolmetaSettings

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def _load(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text())


# -- Formatter ---------------------------------------------------------------


class TestFormatAnalysis:
    def test_counts(self):
        result = ClassificationResult(chains=frozenset("ABC"), ligands=frozenset({"L"}))
        assert format_analysis(result) == "3 amino acid chains and 1 ligands in ASU"

    def test_empty(self):
        assert format_analysis(ClassificationResult()) == "0 amino acid chains and 0 ligands in ASU"


class TestFormatLabel:
    def test_label(self):
        assert format_label({"label": "My model", "entryId": "1ABC"}) == "My model"

    def test_entry_id(self):
        assert format_label({"entryId": "1ABC"}) == "1ABC"

    def test_unknown(self):
        assert format_label({}) == "Unknown File"
        assert format_label(None) == "Unknown File"

    def test_custom_default(self):
        assert format_label(None, default="(none)") == "(none)"

    def test_empty_label_kept(self):
        assert format_label({"label": "", "entryId": "1ABC"}) == ""


# -- Engine ------------------------------------------------------------------


class TestSummarize:
    def test_fixture_snapshot(self):
        data = _load("snapshot_1abc.json")
        s = summarize(data["model"], data["structures"])
        assert isinstance(s, StructureSummary)
        assert s.label == "1ABC"
        assert s.spacegroup == "P 1 21 1"
        assert s.ortho_code == "(#1) A/X0, B/Y0, C*/Z0"
        assert s.analysis == "2 amino acid chains and 1 ligands in ASU"
        assert s.num_chains == 2
        assert s.num_ligands == 1

    def test_missing_everything(self):
        s = summarize({"entryId": "2XYZ"}, [])
        assert s.spacegroup == ""
        assert s.ortho_code == ""
        assert s.label == "2XYZ"
        assert s.analysis == "0 amino acid chains and 0 ligands in ASU"

    def test_no_model(self):
        s = summarize(None)
        assert s.label == "Unknown File"
        assert s.spacegroup == ""
        assert s.ortho_code == ""

    def test_settings_applied(self):
        model = {"_staticPropertyData": {"model_symmetry": {"spacegroup": {
            "cell": {"anglesInRadians": [math.radians(90.5), math.pi / 2, math.pi / 2]},
        }}}}
        strict = summarize(model, [])
        loose = summarize(model, [], MolmetaSettings(near90_tolerance=1.0, unknown_label="?"))
        assert strict.ortho_code == "(#1) A*/X0, B/Y0, C/Z0"
        assert loose.ortho_code == "(#1) A/X0, B/Y0, C/Z0"
        assert loose.label == "?"

    def test_to_dict(self):
        d = summarize(None).to_dict()
        assert set(d) == {"label", "spacegroup", "ortho_code", "analysis", "num_chains", "num_ligands"}

    def test_frozen(self):
        s = summarize(None)
        with pytest.raises(AttributeError):
            s.label = "x"
