"""
FastAPI application — the flyingferret HTTP entry point.

    GET  /api/v1/transform?q=Pizza+or+Tacos%3F
    POST /api/v1/transform        (form field q, or JSON {"q": "..."})
        → {"results": ["Tacos"]}

    GET  /flyingferret/health

Form posts are what `curl --data-urlencode "q=..."` sends, so a shell
helper can be as small as:

    ask() { curl -s --data-urlencode "q=$*" http://localhost:8000/api/v1/transform | jq -r '.results[]'; }
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flyingferret import __version__
from flyingferret.config import get_config
from flyingferret.responder import Responder
from flyingferret.rng import make_rng


# ---------------------------------------------------------------------------
# Globals, set up in lifespan()
# ---------------------------------------------------------------------------
responder: Responder | None = None


def _log_level(cfg: dict) -> int:
    """logging.level from config as a logging constant; unknown names mean INFO."""
    name = str(cfg.get("logging", {}).get("level") or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _setup_logging(cfg: dict):
    """Log to stderr, and to logging.file as well when one is configured."""
    level = _log_level(cfg)
    log_file = cfg.get("logging", {}).get("file")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def _seed_from_config(cfg: dict) -> int | None:
    seed = cfg.get("responder", {}).get("seed")
    if seed is None or seed == "":
        return None
    return int(seed)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    global responder

    cfg = get_config()
    _setup_logging(cfg)
    logger = logging.getLogger(__name__)

    responder = Responder(rng=make_rng(_seed_from_config(cfg)))

    logger.info(
        "flyingferret started — listening on %s:%s",
        cfg["server"]["host"],
        cfg["server"]["port"],
    )
    logger.info("Routes (in priority order): %s", responder.list_routes())

    yield

    logger.info("flyingferret shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="flyingferret",
    description="Dice, decisions and answers.",
    version=__version__,
    lifespan=lifespan,
)


def _results(text: str | None) -> JSONResponse:
    lines = responder.transform(text) if responder else []
    return JSONResponse({"results": lines})


@app.get("/api/v1/transform")
async def transform_get(q: str = ""):
    """Transform the q query parameter."""
    return _results(q)


@app.post("/api/v1/transform")
async def transform_post(request: Request):
    """
    Transform q from a form-encoded body, or from a JSON object body.
    Falls back to the query string when the body carries no q.
    """
    content_type = request.headers.get("content-type", "")
    q = None

    if "application/json" in content_type:
        if await request.body():
            try:
                body = await request.json()
            except ValueError as e:
                return JSONResponse({"error": f"Invalid JSON body: {e}"}, status_code=400)
            if not isinstance(body, dict):
                return JSONResponse({"error": "JSON body must be an object"}, status_code=400)
            q = body.get("q")
    else:
        form = await request.form()
        q = form.get("q")

    if q is None:
        q = request.query_params.get("q", "")
    if not isinstance(q, str):
        return JSONResponse({"error": "q must be a string"}, status_code=400)
    return _results(q)


@app.get("/flyingferret/health")
async def health():
    """Health check."""
    return JSONResponse({
        "status": "ok",
        "version": __version__,
        "routes": responder.list_routes() if responder else [],
    })
