"""
Tax engine HTTP routes — POST /calculate-tax, POST /compare-regimes

Both endpoints take the same raw JSON body (incomeFromSalary, incomeFromRent,
hraComponent, annualRent, section80C, regime, isMetro).

  200: TaxResult / RegimeComparison (camelCase JSON)
  400: {"error": "Validation failed", "errors": [...]}
  500: {"error": "Internal server error", "message": "..."}
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from taxservice.engine.tax_engine import compare_regimes, compute_tax
from taxservice.validation.schemas import InputErrors, NormalizedInput
from taxservice.validation.validator import validate_and_normalize

router = APIRouter(tags=["tax"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_body(request: Request) -> Any:
    """
    Parsed JSON body. An empty body reads as {}; a body that is not JSON
    reads as None, which fails validation as "not an object".
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        # JSONDecodeError, bad UTF-8, or an integer literal past the digit limit
        logger.info("Request body is not valid JSON path=%s", request.url.path)
        return None


def _make_validation_error_response(failure: InputErrors) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "errors": failure.errors},
    )


async def _run(
    request: Request,
    compute: Callable[[NormalizedInput], BaseModel],
) -> JSONResponse:
    """Validate → normalize → compute, mapping each outcome to a response."""
    parsed = validate_and_normalize(await _read_body(request))
    if isinstance(parsed, InputErrors):
        return _make_validation_error_response(parsed)

    try:
        result = compute(parsed)
    except Exception as exc:
        # Validated input never fails here; reaching this is a bug
        logger.error(
            "Tax computation failed on %s: %s", request.url.path, exc, exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    logger.info("Computed %s", request.url.path)
    return JSONResponse(status_code=200, content=result.model_dump(by_alias=True))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/calculate-tax")
async def calculate_tax(request: Request) -> JSONResponse:
    """Compute tax liability under the requested regime (default "new")."""
    return await _run(request, compute_tax)


@router.post("/compare-regimes")
async def compare_tax_regimes(request: Request) -> JSONResponse:
    """Compute both regimes for the same input and recommend the cheaper one."""
    return await _run(request, compare_regimes)
