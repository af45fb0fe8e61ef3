from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from design_api.config import Settings
from design_api.dataset import DatasetStore
from design_api.main import create_app

from .helpers import SAMPLE_DATASET, write_dataset


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    """Write the sample dataset to a temporary file."""
    return write_dataset(tmp_path / "combined.json", SAMPLE_DATASET)


@pytest.fixture
def store(dataset_path: Path) -> DatasetStore:
    return DatasetStore(dataset_path)


@pytest.fixture
def client(dataset_path: Path) -> TestClient:
    """Create test client backed by the sample dataset."""
    app = create_app(Settings(data_path=str(dataset_path)))
    return TestClient(app)
