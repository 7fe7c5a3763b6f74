"""HTTP API exposing duration conversions."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from .durations import DEFAULT_MAX_LENGTH, parse_duration
from .errors import DurationError, InvalidNumberError
from .formatting import format_duration
from .units import UNIT_MS, aliases_for


def _error_detail(exc: DurationError) -> Dict[str, str]:
    return {"error": type(exc).__name__, "message": str(exc)}


def _units_listing() -> List[Dict[str, Any]]:
    return [
        {"unit": unit, "ms": size, "aliases": list(aliases_for(unit))}
        for unit, size in UNIT_MS.items()
    ]


def create_app(max_length: int = DEFAULT_MAX_LENGTH) -> FastAPI:
    app = FastAPI(title="msconv Web API")
    app.state.max_length = max_length

    @app.get("/api/parse")
    async def api_parse(value: str, max_length: Optional[int] = None) -> JSONResponse:
        limit = app.state.max_length if max_length is None else max_length
        try:
            result = parse_duration(value, max_length=limit)
            if not math.isfinite(result):
                # a finite literal times a large unit can still overflow
                raise InvalidNumberError(value)
        except DurationError as exc:
            raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc
        return JSONResponse({"value": value, "ms": result})

    @app.get("/api/format")
    async def api_format(ms: float, long: bool = False) -> JSONResponse:
        try:
            text = format_duration(ms, long=long)
        except DurationError as exc:
            raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc
        return JSONResponse({"ms": ms, "text": text})

    @app.get("/api/units")
    async def api_units() -> JSONResponse:
        return JSONResponse(_units_listing())

    return app
