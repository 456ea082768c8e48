from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from stats_api.common.config import ServerConfig
from stats_api.main import create_app


@pytest.fixture()
def client() -> Iterator[TestClient]:
	with TestClient(create_app(ServerConfig(log_level="WARNING"))) as c:
		yield c
