"""Tests for app.core.logging — JSON formatter and access logging."""

from __future__ import annotations

import json
import logging
import sys

import pytest
from httpx import AsyncClient

from app.core.logging import ACCESS_LOGGER, JSONFormatter, request_id_var


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="solar.test", level=logging.INFO, pathname=__file__, lineno=1,
        msg="estimate %s", args=("ok",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "solar.test"
        assert entry["message"] == "estimate ok"
        assert "request_id" not in entry
        assert "exception" not in entry

    def test_extras_and_request_id(self):
        token = request_id_var.set("req-1")
        try:
            entry = json.loads(JSONFormatter().format(_record(query="tiltDeg=20", status_code=200)))
        finally:
            request_id_var.reset(token)
        assert entry["request_id"] == "req-1"
        assert entry["query"] == "tiltDeg=20"
        assert entry["status_code"] == 200
        assert "origin" not in entry

    def test_exception_included(self):
        try:
            raise ValueError("bad dataset")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad dataset" in entry["exception"]


@pytest.mark.asyncio
class TestRequestLoggingMiddleware:
    async def test_access_line(self, client: AsyncClient):
        handler = _Collect()
        access = logging.getLogger(ACCESS_LOGGER)
        access.addHandler(handler)
        try:
            resp = await client.get(
                "/estimate", params={"tiltDeg": "20"}, headers={"X-Request-ID": "r-42"}
            )
        finally:
            access.removeHandler(handler)

        assert resp.headers["x-request-id"] == "r-42"
        (record,) = handler.records
        assert record.getMessage().startswith("GET /estimate -> 200")
        assert record.query == "tiltDeg=20"
        assert record.status_code == 200

    async def test_request_id_minted_and_cleared(self, client: AsyncClient):
        resp = await client.get("/health")
        assert len(resp.headers["x-request-id"]) == 8
        assert request_id_var.get() == ""
