# tests/utils/test_helpers.py
"""Tests for app/utils/helpers.py module."""

import re
from datetime import datetime
from unittest.mock import MagicMock, patch

from fastapi import FastAPI

from app.utils.helpers import get_summary, host, today_str


class TestTodayStr:
    """Tests for today_str function."""

    def test_format(self) -> None:
        assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", today_str())

    def test_uses_local_time(self) -> None:
        """The rendered time is the aware local time."""
        fixed = datetime(2026, 3, 14, 15, 9, 26).astimezone()
        with patch("app.utils.helpers.datetime") as mock_datetime:
            mock_datetime.now.return_value.astimezone.return_value = fixed
            assert today_str() == "2026-03-14 15:09:26"


class TestHost:
    """Tests for host function."""

    def test_client_address(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.7"
        assert host(request) == "10.0.0.7"

    def test_missing_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


class TestGetSummary:
    """Tests for get_summary function."""

    def _request(self, app: FastAPI, path: str, method: str = "GET") -> MagicMock:
        request = MagicMock()
        request.scope = {"type": "http", "app": app, "path": path, "method": method}
        return request

    def test_summary_of_matching_route(self) -> None:
        app = FastAPI()

        @app.get("/api/types", summary="List types")
        async def list_types() -> list[str]:
            return []

        assert get_summary(self._request(app, "/api/types")) == "List types"

    def test_no_matching_route(self) -> None:
        app = FastAPI()
        assert get_summary(self._request(app, "/missing")) is None
