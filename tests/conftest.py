"""Shared fixtures: pasted moon report artifacts."""

from __future__ import annotations

from pathlib import Path

import pytest

ARTIFACTS = Path(__file__).resolve().parent / "artifacts"

WELL_FORMED = {
    "from EVE": "moon_report.txt",
    "from Excel": "moon_report_excel.txt",
    "mixed inputs": "moon_report_mixed.txt",
}


def read_artifact(name: str) -> str:
    # newline="" keeps \r\n so the tokenizer sees what the clipboard held
    with open(ARTIFACTS / name, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture(params=list(WELL_FORMED.values()), ids=list(WELL_FORMED.keys()))
def well_formed_text(request) -> str:
    """Each well-formed variant of the reference moon report."""
    return read_artifact(request.param)


@pytest.fixture
def moon_text() -> str:
    return read_artifact("moon_report.txt")
