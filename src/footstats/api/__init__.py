"""REST API exposing the statistics pipeline over an uploaded dataset."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query, Request

from footstats import __version__
from footstats.ingest import DatasetStructureError, clean_records, decode_players
from footstats.models import AggregateResult
from footstats.report import build_results


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="footstats", version=__version__)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze", response_model=AggregateResult)
    async def analyze(
        request: Request,
        top: int | None = Query(None, ge=1, le=100),
    ) -> AggregateResult:
        payload = await request.body()
        if not payload:
            raise HTTPException(status_code=400, detail="request body is empty")
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail=f"Body is not UTF-8: {exc}") from exc

        try:
            clean = clean_records(decode_players(text))
        except DatasetStructureError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        logger.info(
            "Analyzed upload: %s valid of %s entries",
            clean.counters.total_valid,
            clean.counters.total_parsed,
        )
        return build_results(clean, top_n=top)

    return app


__all__ = ["create_app"]
