"""
Postboard Backend — Request Logging Middleware Tests
======================================================

What:  One access line per request, including requests whose handler raised.
How:   Calls RequestLoggingMiddleware.dispatch directly with a bare Starlette
       Request and a stub call_next.
"""

import logging
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.logging import RequestLoggingMiddleware


def _request(path="/posts"):
    return Request({
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "scheme": "http",
        "query_string": b"",
        "headers": [],
        "client": ("10.0.0.1", 5000),
        "server": ("test", 80),
    })


class TestRequestLogging:

    def setup_method(self):
        self.middleware = RequestLoggingMiddleware(app=MagicMock())

    @pytest.mark.asyncio
    async def test_success_logged_at_info(self, caplog):
        async def call_next(request):
            return Response(status_code=204)

        with caplog.at_level(logging.INFO, logger="postboard.access"):
            response = await self.middleware.dispatch(_request(), call_next)

        assert response.status_code == 204
        records = [r for r in caplog.records if r.name == "postboard.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].status == 204

    @pytest.mark.asyncio
    async def test_raising_handler_logged_as_500(self, caplog):
        async def call_next(request):
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="postboard.access"):
            with pytest.raises(RuntimeError):
                await self.middleware.dispatch(_request(), call_next)

        records = [r for r in caplog.records if r.name == "postboard.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500
        assert records[0].path == "/posts"

    @pytest.mark.asyncio
    async def test_health_not_logged(self, caplog):
        async def call_next(request):
            return Response(status_code=200)

        with caplog.at_level(logging.INFO, logger="postboard.access"):
            await self.middleware.dispatch(_request("/health"), call_next)

        assert not [r for r in caplog.records if r.name == "postboard.access"]
