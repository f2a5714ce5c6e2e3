"""Shared pytest fixtures for perception_utils tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from perception_utils.core.types import Classification, Label


def make_classification(label: Label, probability: float) -> Classification:
    return Classification(label=label, probability=probability)


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture
def sample_classifications() -> list[Classification]:
    """Three hypotheses with a unique maximum on TRUCK."""
    return [
        make_classification(Label.CAR, 0.5),
        make_classification(Label.TRUCK, 0.8),
        make_classification(Label.BUS, 0.7),
    ]


@pytest.fixture
def tied_classifications() -> list[Classification]:
    """CAR and TRUCK share the maximum; CAR comes first."""
    return [
        make_classification(Label.CAR, 0.8),
        make_classification(Label.TRUCK, 0.8),
        make_classification(Label.BUS, 0.7),
    ]
