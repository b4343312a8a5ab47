import logging

from fastapi import APIRouter

from statsapi.api.schemas import (
    CalculateIn,
    CalculateOut,
    ErrorOut,
    HistogramBin,
    HistogramIn,
    HistogramOut,
    Statistics,
)
from statsapi.observability.metrics import observe_dataset
from statsapi.services.cleaning import filter_numeric
from statsapi.services.histogram import build_histogram
from statsapi.services.statistics import compute_statistics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", responses={400: {"model": ErrorOut}})

@router.post("/calculate", response_model=CalculateOut, responses={422: {"model": ErrorOut}})
async def calculate(body: CalculateIn, strict: bool = False):
    """
    Accepts a JSON body with a 'data' array and returns its descriptive statistics.
    Non-numeric and NaN entries are ignored; 400 if nothing numeric is left.
    With ?strict=true an undefined skewness or coefficient of variation
    is a 422 error instead of null.
    """
    values = filter_numeric(body.data)
    observe_dataset("statistics", len(values))
    stats = compute_statistics(values, strict=strict)
    logger.debug("Computed statistics over %d values", len(values))
    return CalculateOut(statistics=Statistics(**stats.as_dict()), data_points=len(values))

@router.post("/histogram", response_model=HistogramOut)
async def histogram(body: HistogramIn):
    """
    Accepts a JSON body with a 'data' array and an optional 'bins' count.
    Returns equal-width bins with counts and percentages.
    """
    values = filter_numeric(body.data)
    observe_dataset("histogram", len(values))
    bins = build_histogram(values, body.bins)
    return HistogramOut(histogram=[HistogramBin(**b.as_dict()) for b in bins])
