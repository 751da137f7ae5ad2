"""
Shared fixtures and helpers for depstat tests.

Everything runs in-process: edge documents are plain strings, the CLI is
driven through run_analyse with StringIO streams, and the API through
FastAPI's TestClient.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from depstat.analytics.accumulator import accumulate  # noqa: E402


def edge(src: str, dst: str) -> str:
    return f'"{src}" -> "{dst}";'


def edges_text(*pairs: tuple[str, str]) -> str:
    return "\n".join(edge(s, d) for s, d in pairs) + "\n"


def build_modules(*pairs: tuple[str, str]) -> dict:
    return accumulate(edge(s, d) for s, d in pairs)


# A small layered project: app -> service -> {db, log}, cli -> service, service -> log
LAYERED_EDGES = [
    ("app",     "service"),
    ("cli",     "service"),
    ("service", "db"),
    ("service", "log"),
    ("db",      "log"),
    ("app",     "log"),
]


@pytest.fixture
def layered_modules() -> dict:
    return build_modules(*LAYERED_EDGES)


@pytest.fixture
def layered_text() -> str:
    return edges_text(*LAYERED_EDGES)


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient
    from depstat.main import app
    return TestClient(app)
