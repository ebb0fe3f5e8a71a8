"""Shared pytest fixtures for all tests."""

import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from csvscope.engine import TokenEstimator
from csvscope.main import app, get_service, get_validator
from csvscope.service import AnalysisService
from csvscope.store import AnalysisStore
from csvscope.validation import RequestValidator

_WORDS = re.compile(r"\w+|[^\w\s]")


class FakeEncoding:
    """Deterministic stand-in for a BPE vocabulary: one token per word or symbol."""

    name = "fake"

    def encode_ordinary(self, text: str) -> list[int]:
        return [len(m.group()) for m in _WORDS.finditer(text)]


@pytest.fixture
def tokens() -> TokenEstimator:
    return TokenEstimator(FakeEncoding())


@pytest.fixture
def store(tmp_path: Path) -> AnalysisStore:
    return AnalysisStore(tmp_path / "analyses.json")


@pytest.fixture
def service(store: AnalysisStore, tokens: TokenEstimator) -> AnalysisService:
    return AnalysisService(store=store, tokens=tokens)


@pytest.fixture
def test_client(service: AnalysisService) -> Iterator[TestClient]:
    """FastAPI test client backed by a temporary store and the fake tokenizer."""
    app.dependency_overrides[get_service] = lambda: service
    app.dependency_overrides[get_validator] = lambda: RequestValidator(["Sonny Hayes"])
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def simple_csv() -> str:
    return (
        "driver,number,team\n"
        "Max Verstappen,1,Red Bull Racing\n"
        "Lewis Hamilton,44,Mercedes\n"
        "Charles Leclerc,16,Ferrari"
    )
