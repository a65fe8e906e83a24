"""Chart point data model."""

from decimal import Decimal

from pydantic import BaseModel, Field


class ChartPoint(BaseModel):
    """A single (time, value) sample of a chart series.

    Field names are lower case single letters to keep the payload compact
    for browser-side renderers.
    """

    x: int = Field(..., description="Point time in seconds since epoch (UTC)")
    y: Decimal = Field(..., description="Point value")

    model_config = {"frozen": True}
