from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from statsapi import config


# Output models serialize with camelCase keys (stdDev, binStart, ...)
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Input schema for /api/calculate
class CalculateIn(BaseModel):
    data: List[Any]  # Raw values; non-numeric entries are filtered out

    model_config = {"extra": "forbid"}  # Forbid extra fields in input


# Input schema for /api/histogram
class HistogramIn(BaseModel):
    data: List[Any]  # Raw values; non-numeric entries are filtered out
    bins: int = Field(default=config.DEFAULT_BINS, ge=1, le=config.MAX_BINS, strict=True)

    model_config = {"extra": "forbid"}


# Descriptive statistics of one dataset
class Statistics(CamelModel):
    count: int
    sum: float
    mean: float
    median: float
    mode: float
    variance: float
    std_dev: float
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    skewness: Optional[float] = None  # null when standard deviation is zero
    coefficient_of_variation: Optional[float] = None  # null when mean is zero


# Output schema for /api/calculate
class CalculateOut(CamelModel):
    success: bool = True
    statistics: Statistics
    data_points: int  # Number of numeric values used


# One histogram bin: [binStart, binEnd), last bin closed
class HistogramBin(CamelModel):
    bin_start: float
    bin_end: float
    count: int
    percentage: float


# Output schema for /api/histogram
class HistogramOut(CamelModel):
    success: bool = True
    histogram: List[HistogramBin]


# Output schema for /api/upload-csv
class UploadOut(CamelModel):
    success: bool = True
    columns: List[str]  # Header names in file order
    row_count: int
    statistics: Dict[str, Statistics]  # Only columns with numeric values
    data: List[Dict[str, Optional[str]]]  # Raw parsed rows


# Error payload for every failed request
class ErrorOut(BaseModel):
    error: str
    message: Optional[str] = None
    detail: Optional[Any] = None
