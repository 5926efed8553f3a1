"""
HTTP surface: ``GET /price`` returning ``{"price": <float>}``.

Status codes
    400  missing / malformed query parameters (caught before pricing)
    500  pricer-domain error (message passed through) or unexpected failure
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import alp
from alp.config import ALPConfig
from alp.errors import InvalidArgument, RequestError
from alp.pricing.tree import price_american
from alp.request import parse_pricing_request
from alp.types import ExerciseGrid

logger = logging.getLogger(__name__)


def create_app(config: ALPConfig | None = None) -> FastAPI:
    config = config or ALPConfig.load()
    pricing_cfg = config.get("pricing", {}) or {}
    grid = ExerciseGrid(pricing_cfg.get("grid", ExerciseGrid.TERMINAL))
    check_probability = bool(pricing_cfg.get("check_probability", False))
    max_steps = pricing_cfg.get("max_steps")
    max_steps = int(max_steps) if max_steps is not None else None

    app = FastAPI(
        title="American Lattice Pricer",
        description="American option prices on a CRR binomial tree",
        version=alp.__version__,
    )

    @app.exception_handler(RequestError)
    async def _request_error(request: Request, exc: RequestError):
        logger.warning("rejected %s: %s", request.url.query, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(InvalidArgument)
    async def _pricer_error(request: Request, exc: InvalidArgument):
        logger.warning("pricer error for %s: %s", request.url.query, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.error("unexpected failure for %s", request.url.query, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/price")
    def price(request: Request):
        req = parse_pricing_request(request.query_params, max_steps=max_steps)
        value = price_american(
            req.S, req.K, req.T, req.r, req.sigma,
            n_steps=req.steps,
            option_type=req.option_type,
            grid=grid,
            check_probability=check_probability,
        )
        logger.debug("priced %s -> %.6f", req, value)
        return {"price": value}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
