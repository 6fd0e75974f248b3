"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from feature_finder.features.classifier import FeatureClassifier

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def queries_path() -> Path:
    return FIXTURES_DIR / "queries.jsonl"


@pytest.fixture
def classifier() -> FeatureClassifier:
    return FeatureClassifier()
