from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
API_DIR = ROOT / "API"
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))

# Test-mode runtime guards:
# - file-backed progress store in a throwaway directory
# - no gateway auth unless a test turns it on
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("PROGRESS_STORE_BACKEND", "file")
os.environ.setdefault("RUNTIME_DATA_DIR", tempfile.mkdtemp(prefix="upsc_tracker_test_"))
os.environ.setdefault("GATEWAY_AUTH_ENABLED", "false")

from upsc_tracker.main import app  # noqa: E402
from upsc_tracker.syllabus.model import SyllabusTree  # noqa: E402
from upsc_tracker.syllabus.normalizer import normalize_forest  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    with TestClient(app) as tc:
        yield tc


SMALL_SYLLABUS = [
    {
        "id": "p",
        "name": "Paper",
        "children": [
            {
                "id": "s",
                "name": "Section",
                "children": [
                    {"id": "a", "name": "Topic A"},
                    {"id": "b", "name": "Topic B"},
                ],
            },
            {"id": "c", "name": "Topic C"},
        ],
    }
]


@pytest.fixture
def small_tree() -> SyllabusTree:
    return SyllabusTree.from_definitions(normalize_forest(SMALL_SYLLABUS))
