# src/curconv/adapters/providers/schemas.py
"""
Wire Schemas for the exchangerate-api.com v6 Responses

Pydantic models mirroring the JSON the service returns. Field names use the
service's hyphenated keys as aliases. Each success schema converts itself to
the matching domain model.

Files that USE this module:
- curconv.adapters.providers.exchangerate_api (decodes responses)

Files that this module USES:
- curconv.domain.models (domain payloads)
"""
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from curconv.domain.models import ConversionResult, Freshness, RatePair, RateSet


class ErrorEnvelope(BaseModel):
    """Body sent with non-success status codes."""
    model_config = ConfigDict(extra="ignore")

    result: str
    error_type: str = Field(alias="error-type")


class _SuccessEnvelope(BaseModel):
    """Fields common to every success response."""
    model_config = ConfigDict(extra="ignore")

    result: str
    documentation: str
    terms_of_use: str = Field(alias="terms-of-use")
    time_last_update_unix: int = Field(alias="time-last-update-unix")
    time_last_update_utc: str = Field(alias="time-last-update-utc")
    time_next_update_unix: int = Field(alias="time-next-update-unix")
    time_next_update_utc: str = Field(alias="time-next-update-utc")
    base_code: str = Field(alias="base-code")

    def freshness(self) -> Freshness:
        return Freshness(
            last_update_unix=self.time_last_update_unix,
            last_update_utc=self.time_last_update_utc,
            next_update_unix=self.time_next_update_unix,
            next_update_utc=self.time_next_update_utc,
        )


class MultiRateResponse(_SuccessEnvelope):
    """``/latest/{base}`` response."""
    conversion_rates: Dict[str, float] = Field(alias="conversion-rates")

    def to_domain(self) -> RateSet:
        return RateSet(
            base_code=self.base_code,
            rates=dict(self.conversion_rates),
            freshness=self.freshness(),
        )


class PairRateResponse(_SuccessEnvelope):
    """``/pair/{from}/{to}`` response."""
    target_code: str = Field(alias="target-code")
    conversion_rate: float = Field(alias="conversion-rate")

    def to_domain(self) -> RatePair:
        return RatePair(
            base_code=self.base_code,
            target_code=self.target_code,
            rate=self.conversion_rate,
            freshness=self.freshness(),
        )


class ConversionResponse(PairRateResponse):
    """``/pair/{from}/{to}/{amount}`` response."""
    conversion_result: float = Field(alias="conversion-result")

    def to_domain(self) -> ConversionResult:
        return ConversionResult(
            base_code=self.base_code,
            target_code=self.target_code,
            rate=self.conversion_rate,
            result=self.conversion_result,
            freshness=self.freshness(),
        )
