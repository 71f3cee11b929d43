"""
Minimal forwarding proxy for the NBA Stats API.

stats.nba.com blocks most cloud IP ranges. Deploy this somewhere that isn't
blocked and point NBA_STATS_PROXY_URL at it.

Run: shotsto30 proxy  (or uvicorn shotsto30.proxy.server:app)
Usage: GET ?url=<percent-encoded https://stats.nba.com/stats/... URL>
"""

import logging
from typing import Optional

import requests
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse
from starlette.background import BackgroundTask

from ..api.transport import NBA_HEADERS, NBA_STATS_ORIGIN
from ..monitoring import capture_errors, init_sentry

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def is_allowed_target(url: Optional[str]) -> bool:
    """Only stats.nba.com URLs are forwarded."""
    return bool(url) and url.startswith(NBA_STATS_ORIGIN)


@capture_errors(step_name="proxy_upstream")
def fetch_upstream(url: str, timeout: Optional[float] = None) -> requests.Response:
    """Re-issue the request with browser headers; body is left unread for streaming."""
    return requests.get(url, headers=NBA_HEADERS, stream=True, timeout=timeout)


def create_app(timeout: Optional[float] = None) -> FastAPI:
    """
    Build the proxy application.

    Args:
        timeout: Upstream request timeout in seconds (None = no timeout)
    """
    init_sentry()
    app = FastAPI(title="NBA Stats proxy", docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    def forward(request: Request, path: str = ""):
        if request.method != "GET":
            return Response(status_code=405)

        url = request.query_params.get("url")
        if not is_allowed_target(url):
            return JSONResponse(
                {"error": "Missing or invalid url query (must be stats.nba.com)"},
                status_code=400,
            )

        try:
            upstream = fetch_upstream(url, timeout=timeout)
        except requests.RequestException as e:
            logger.error("Proxy fetch failed for %s: %s", url, e)
            return JSONResponse(
                {"error": "Proxy fetch failed", "message": str(e)},
                status_code=502,
            )

        logger.info("Proxied %s -> %s", url, upstream.status_code)
        return StreamingResponse(
            upstream.iter_content(chunk_size=CHUNK_SIZE),
            status_code=upstream.status_code,
            headers={"Content-Type": upstream.headers.get("Content-Type") or "application/json"},
            background=BackgroundTask(upstream.close),
        )

    return app


app = create_app()
