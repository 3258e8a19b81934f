"""
FastAPI application exposing the validation engine over HTTP.

Endpoints:
- GET  /               service banner
- GET  /health         liveness probe
- GET  /types          supported input type tags
- POST /validate       validate one value
- POST /validate/batch validate many values of one type

Front-end forms post the value, the type tag and the same options they would
pass to `validate_input`. An unknown type tag is reported as an ordinary
failure result; only malformed request bodies produce HTTP errors (422).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI
from pydantic import BaseModel, Field

from ..config import ValidationConfig
from ..dispatch import supported_types, validate_input

logger = logging.getLogger(__name__)

# Scalars a form field can carry; dates travel as ISO strings.
FieldValue = Union[str, int, float, None]


# Pydantic models for API requests/responses
class ValidateRequest(BaseModel):
    """Request model for a single value."""
    value: FieldValue = None
    type: str
    config: Optional[ValidationConfig] = None


class BatchValidateRequest(BaseModel):
    """Request model for many values of the same type."""
    type: str
    values: List[FieldValue] = Field(default_factory=list)
    config: Optional[ValidationConfig] = None


class ValidateResponse(BaseModel):
    """Mirror of `ValidationResult.to_dict()`."""
    is_valid: bool
    error_message: Optional[str] = None
    normalized_value: Any = None


# FastAPI app configuration
app = FastAPI(
    title="vouch API",
    description="Deterministic input validation service",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/")
def root() -> Dict[str, str]:
    return {"message": "vouch API - POST /validate to check a value"}


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy", "service": "vouch-api"}


@app.get("/types")
def list_types() -> Dict[str, List[str]]:
    return {"types": supported_types()}


@app.post("/validate", response_model=ValidateResponse, response_model_exclude_none=True)
def validate(request: ValidateRequest) -> Dict[str, Any]:
    result = validate_input(request.value, request.type, request.config)
    if not result.is_valid:
        logger.debug("validation failed for type %s: %s", request.type, result.error_message)
    return result.to_dict()


@app.post("/validate/batch", response_model=List[ValidateResponse], response_model_exclude_none=True)
def validate_batch(request: BatchValidateRequest) -> List[Dict[str, Any]]:
    results = [validate_input(v, request.type, request.config).to_dict() for v in request.values]
    logger.info(
        "batch of %d %s values, %d invalid",
        len(results),
        request.type,
        sum(1 for r in results if not r["is_valid"]),
    )
    return results
