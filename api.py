"""
Kansuji — FastAPI Server
========================

RESTful API over the kansuji codec.

Endpoints:
    POST /decode       Kansuji text → number
    POST /encode       Number → canonical kansuji text
    POST /normalize    Any accepted spelling → canonical spelling
    GET  /health       Health check / readiness probe

Configuration (environment or .env):
    KANSUJI_LOG_LEVEL          Logging level (default INFO)
    KANSUJI_MAX_TEXT_LENGTH    Longest accepted input text (default 64)

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Union

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from kansuji import __version__
from kansuji.exceptions import KansujiError
from kansuji.numeral import Kansuji, normalize

load_dotenv()

LOG_LEVEL = os.environ.get("KANSUJI_LOG_LEVEL", "INFO").upper()
MAX_TEXT_LENGTH = int(os.environ.get("KANSUJI_MAX_TEXT_LENGTH", "64"))

logger = logging.getLogger(__name__)


# ─── Application Lifespan ───────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once on startup."""
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Kansuji API %s starting (max text length %d)", __version__, MAX_TEXT_LENGTH)
    yield


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Kansuji API",
    description=(
        "Decode Japanese kanji numerals (垓 down to 毛) to numbers, "
        "and encode numbers as canonical kanji numerals."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class TextRequest(BaseModel):
    """Request body for /decode and /normalize."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Kansuji text, e.g. 百二十三兆五百四十万二.",
        json_schema_extra={"example": "百二十三兆五百四十万二"},
    )


class EncodeRequest(BaseModel):
    """Request body for /encode. Integers are encoded exactly."""

    value: Union[int, float] = Field(..., json_schema_extra={"example": 123000005400002})


class NumberOut(BaseModel):
    """A decoded or encoded value."""

    canonical: str = Field(description="Canonical kansuji spelling")
    integer: int
    fraction: float
    value: float = Field(description="integer + fraction as a double")
    is_integer: bool


class DecodeResponse(NumberOut):
    text: str = Field(description="The text as submitted")


class NormalizeResponse(BaseModel):
    text: str
    canonical: str


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _number_fields(value: Kansuji) -> dict:
    return {
        "canonical": value.encode(),
        "integer": value.integer,
        "fraction": value.fraction,
        "value": value.to_float(),
        "is_integer": value.is_integer,
    }


@app.exception_handler(KansujiError)
async def kansuji_error_handler(request: Request, exc: KansujiError) -> JSONResponse:
    """Every codec failure becomes a 422 carrying the machine-readable code."""
    body = ErrorResponse(code=exc.code, message=str(exc), details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


_ERROR_RESPONSES = {422: {"model": ErrorResponse, "description": "Invalid kansuji or value"}}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post("/decode", summary="Decode kansuji text", tags=["Codec"], responses=_ERROR_RESPONSES)
def decode_text(request: TextRequest) -> DecodeResponse:
    """Parse kansuji text into its integer and fractional parts."""
    value = Kansuji.decode(request.text)
    return DecodeResponse(text=request.text, **_number_fields(value))


@app.post("/encode", summary="Encode a number", tags=["Codec"], responses=_ERROR_RESPONSES)
def encode_value(request: EncodeRequest) -> NumberOut:
    """Render a non-negative number as canonical kansuji.

    Floats keep three fractional places (分, 厘, 毛), rounded to nearest.
    """
    if isinstance(request.value, int):
        value = Kansuji.from_int(request.value)
    else:
        value = Kansuji.from_float(request.value)
    return NumberOut(**_number_fields(value))


@app.post(
    "/normalize",
    summary="Re-spell kansuji canonically",
    tags=["Codec"],
    responses=_ERROR_RESPONSES,
)
def normalize_text(request: TextRequest) -> NormalizeResponse:
    return NormalizeResponse(text=request.text, canonical=normalize(request.text))


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
