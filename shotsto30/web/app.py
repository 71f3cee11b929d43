"""
Shots to 30 HTTP API

Routes:
    GET /api/players/search?q=<query>   Player search envelope
    GET /api/players/{id}/stats         Season averages for one player
    GET /health                         Liveness check

Run with: shotsto30 serve  (or uvicorn shotsto30.web.app:app)
"""

import logging
import math
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Config
from ..models.search import SearchEnvelope
from ..monitoring import capture_exception, init_sentry, set_request_context
from ..stats_client import StatsClient

logger = logging.getLogger(__name__)


def parse_player_id(raw: str) -> Optional[int]:
    """Parse a path segment as a finite number; None when it isn't one."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def cache_control(revalidate_seconds: int) -> str:
    """Revalidation hint for the hosting layer (no in-process cache)."""
    return f"public, s-maxage={revalidate_seconds}, stale-while-revalidate"


def create_app(stats_client: Optional[StatsClient] = None, config: Optional[Config] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        stats_client: Client to delegate to (defaults to one built from config)
        config: Configuration (defaults to Config.from_env())
    """
    config = config or (stats_client.config if stats_client else Config.from_env())
    init_sentry()

    app = FastAPI(title="Shots to 30 API", version="1.0.0")
    app.state.config = config
    app.state.stats_client = stats_client or StatsClient(config=config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_revalidate_header(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith("/api/") and response.status_code == 200:
            response.headers["Cache-Control"] = cache_control(config.revalidate_seconds)
        return response

    @app.get("/health")
    def health():
        return {"status": "ok", "proxy": config.uses_proxy}

    @app.get("/api/players/search")
    def search_players(request: Request, q: Optional[str] = None):
        if not q:
            return JSONResponse(SearchEnvelope.empty().to_dict())

        client: StatsClient = request.app.state.stats_client
        set_request_context("/api/players/search", {"q": q}, proxy_mode=config.uses_proxy)

        try:
            outcome = client.search_players(q)
        except Exception as e:
            logger.error("Search error: %s", e)
            capture_exception(e, tags={"route": "search"})
            return JSONResponse(SearchEnvelope.empty().to_dict())

        envelope = SearchEnvelope.from_outcome(outcome)
        logger.info(
            "Search for %r: Found %d players%s",
            q, len(envelope.data), f"; error: {envelope.error}" if envelope.error else "",
        )
        status_code = 503 if envelope.error else 200
        return JSONResponse(envelope.to_dict(), status_code=status_code)

    @app.get("/api/players/{player_id}/stats")
    def player_stats(request: Request, player_id: str):
        parsed_id = parse_player_id(player_id)
        if parsed_id is None:
            return JSONResponse({"error": "Invalid player ID"}, status_code=400)

        client: StatsClient = request.app.state.stats_client
        set_request_context("/api/players/{id}/stats", {"id": parsed_id}, proxy_mode=config.uses_proxy)

        try:
            stats = client.fetch_player_season_averages(parsed_id)
        except Exception as e:
            logger.error("Stats error for player %s: %s", parsed_id, e)
            capture_exception(e, tags={"route": "stats"})
            stats = None

        if stats is None:
            return JSONResponse({"error": "Player stats not found"}, status_code=404)

        return JSONResponse({"data": stats.to_dict()})

    return app


app = create_app()
