from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from maps_api_client.config import MapsClientConfig  # noqa: E402
from tests.shared.http import API_KEY  # noqa: E402


@pytest.fixture
def config() -> MapsClientConfig:
    return MapsClientConfig(api_key=API_KEY)
