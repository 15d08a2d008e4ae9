"""
Latvian Number Words: FastAPI Server
====================================

RESTful API for rendering numbers and euro amounts as Latvian words.

Endpoints:
    POST /convert           Convert a single number
    POST /convert/batch     Convert a list of numbers (all or nothing)
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Config (environment or .env):
    LV_NUMWORDS_LOG_LEVEL    Logging level (default INFO)
    LV_NUMWORDS_MAX_BATCH    Max numbers per batch request (default 100)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from lv_numwords import __version__
from lv_numwords.converter import describe
from lv_numwords.exceptions import NumberConversionError
from lv_numwords.models import Conversion

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_BATCH = 100

# Passed through untouched: the converter does the type checking, so a JSON
# true/null is rejected with INVALID_INPUT instead of being coerced to 1/None
NumberIn = Any


def _max_batch() -> int:
    return int(os.getenv("LV_NUMWORDS_MAX_BATCH", str(DEFAULT_MAX_BATCH)))


# ─── Application Lifespan ───────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(level=os.getenv("LV_NUMWORDS_LOG_LEVEL", "INFO").upper())
    logger.info("Latvian number words API %s ready (max batch %d)", __version__, _max_batch())
    yield
    logger.info("Latvian number words API shutting down")


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Latvian Number Words API",
    description=(
        "Renders integers and euro amounts as Latvian words. "
        "Cents are read from the decimal text of the amount, never rounded."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    number: NumberIn = Field(
        ...,
        description="Integer, decimal, or numeric string to convert.",
        json_schema_extra={"example": 123.45},
    )
    as_currency: bool = Field(
        False,
        description="Render as a euro amount even when the value is integral.",
    )


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    numbers: list[NumberIn] = Field(..., min_length=1)
    as_currency: bool = False


class ConversionOut(Conversion):
    """API-facing conversion (inherits all fields from Conversion)."""

    model_config = {"json_schema_extra": {"example": {
        "number": "123.45",
        "kind": "CURRENCY",
        "words": "viens simts divdesmit trīs eiro un četrdesmit pieci centi",
    }}}


class BatchConvertResponse(BaseModel):
    results: list[ConversionOut]


class HealthResponse(BaseModel):
    status: str
    version: str
    language: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _convert_or_422(number: NumberIn, as_currency: bool) -> ConversionOut:
    """Run the converter, mapping its errors to an HTTP 422."""
    try:
        conversion = describe(number, as_currency=as_currency)
    except NumberConversionError as exc:
        logger.warning("Rejected %r: [%s] %s", number, exc.code, exc)
        raise HTTPException(
            status_code=422,
            detail={"code": exc.code, "message": str(exc), "details": exc.details},
        ) from exc
    return ConversionOut.model_validate(conversion, from_attributes=True)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to Latvian words",
    tags=["Conversion"],
    responses={422: {"description": "Not a number, or outside the 64-bit range"}},
)
def convert_number(request: ConvertRequest) -> ConversionOut:
    """Convert one number.

    - Integers are rendered as plain cardinals.
    - Values with a non-zero fractional part (or `as_currency=true`) are
      rendered as euro amounts: `... eiro un ... centi`.
    """
    return _convert_or_422(request.number, request.as_currency)


@app.post(
    "/convert/batch",
    summary="Convert several numbers at once",
    tags=["Conversion"],
    responses={
        413: {"description": "Too many numbers in one request"},
        422: {"description": "At least one item is not a convertible number"},
    },
)
def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    """Convert every number in the list, or fail on the first bad one."""
    limit = _max_batch()
    if len(request.numbers) > limit:
        raise HTTPException(status_code=413, detail=f"Too many numbers (max {limit})")

    return BatchConvertResponse(
        results=[_convert_or_422(n, request.as_currency) for n in request.numbers],
    )


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__, language="lv")
