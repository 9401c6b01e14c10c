import logging
from fastapi import APIRouter, HTTPException

from extrema.config import get_settings
from extrema.observability.metrics import record_engine_error
from extrema.services.errors import StatsError
from extrema.services.numeric import (
    bottom_k,
    bounds,
    maximum,
    minimum,
    pairwise_max,
    pairwise_min,
    top_k,
)
from extrema.api.schemas import ExtremeIn, ScalarOut, SelectIn, SequenceIn, SequenceOut

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_size(operation: str, values: list) -> None:
    limit = get_settings().max_values
    if len(values) > limit:
        raise HTTPException(
            status_code=400,
            detail={
                "operation": operation,
                "error": "TooManyValues",
                "message": f"at most {limit} values are accepted, got {len(values)}",
            },
        )


def _run(operation: str, func, *args):
    """
    Call an engine function and turn its typed errors into 400 responses
    that name the operation.
    """
    try:
        return func(*args)
    except StatsError as exc:
        logger.warning("%s failed: %s: %s", operation, exc.kind, exc)
        record_engine_error(operation, exc.kind)
        raise HTTPException(
            status_code=400,
            detail={"operation": operation, "error": exc.kind, "message": str(exc)},
        ) from exc


def _extreme(operation: str, body: ExtremeIn, seq_func, pair_func) -> ScalarOut:
    # Same name, two arities: a sequence or a pair of scalars
    if body.values is not None:
        _check_size(operation, body.values)
        result = _run(operation, seq_func, body.values)
    else:
        result = _run(operation, pair_func, body.a, body.b)
    return ScalarOut(operation=operation, result=result)


@router.post("/max", response_model=ScalarOut)
async def max_(body: ExtremeIn):
    """Highest value of 'values', or the higher of 'a' and 'b'."""
    return _extreme("max", body, maximum, pairwise_max)


@router.post("/min", response_model=ScalarOut)
async def min_(body: ExtremeIn):
    """Lowest value of 'values', or the lower of 'a' and 'b'."""
    return _extreme("min", body, minimum, pairwise_min)


@router.post("/bounds", response_model=SequenceOut)
async def bounds_(body: SequenceIn):
    """Returns [min, max] of 'values'."""
    _check_size("bounds", body.values)
    return SequenceOut(operation="bounds", result=_run("bounds", bounds, body.values))


@router.post("/maxk", response_model=SequenceOut)
async def maxk(body: SelectIn):
    """Returns the 'k' highest values, ascending."""
    _check_size("maxk", body.values)
    return SequenceOut(operation="maxk", result=_run("maxk", top_k, body.values, body.k))


@router.post("/mink", response_model=SequenceOut)
async def mink(body: SelectIn):
    """Returns the 'k' lowest values, ascending."""
    _check_size("mink", body.values)
    return SequenceOut(operation="mink", result=_run("mink", bottom_k, body.values, body.k))
