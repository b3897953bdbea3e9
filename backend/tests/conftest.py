"""
Root conftest file for pytest.

This file is automatically loaded by pytest and contains setup
for making imports work correctly in tests, plus shared fixtures.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add the backend directory to the Python path for imports
backend_dir = str(Path(__file__).parent.parent)
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

# Tests never talk to a real Redis server
os.environ["CACHE_ENABLED"] = "false"
os.environ.setdefault("LOGS_DIR", os.path.join(tempfile.gettempdir(), "docintel_test_logs"))

from docintel.schemas import AnalysisResult  # noqa: E402
from docintel.services.catalog import StageCatalog, get_catalog  # noqa: E402


@pytest.fixture
def catalog():
    """The packaged stage catalog."""
    return get_catalog()


@pytest.fixture
def small_catalog():
    """
    A minimal catalog with one Universal mandatory document, one Universal
    Legal document and one mandatory document per stage.
    """
    stage_lists = {
        stage: {
            "mandatory": [
                {"id": f"{stage.lower()}_plan", "label": f"{stage} Plan", "category": "03_Product"}
            ],
            "optional": [
                {"id": f"{stage.lower()}_extra", "label": f"{stage} Extra", "category": "10_Misc"}
            ],
        }
        for stage in ("Idea", "MVP", "Seed", "Growth")
    }
    return StageCatalog.from_dict({
        "data_room_categories": ["03_Product", "07_Legal", "02_Pitch_Deck", "10_Misc"],
        "legal_category": "07_Legal",
        "universal": [
            {"id": "deck", "label": "Deck", "category": "02_Pitch_Deck", "is_mandatory": True},
            {"id": "incorporation", "label": "Incorporation", "category": "07_Legal", "is_mandatory": False},
        ],
        "stages": stage_lists,
    })


@pytest.fixture
def make_analysis():
    """Factory for AnalysisResult records with sensible defaults."""
    def _make(document_type, sections=("Overview", "Details"), risk_signals=(), suggestions=(),
              stage_relevance="Mandatory"):
        return AnalysisResult(
            document_type=document_type,
            stage_relevance=stage_relevance,
            sections_detected=list(sections),
            summary=f"Analysis of {document_type}",
            missing_sections=[],
            risk_signals=list(risk_signals),
            suggestions=list(suggestions),
        )
    return _make
