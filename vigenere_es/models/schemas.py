from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class KeyLengthStrategy(str, Enum):
    """How trial periods are scored when estimating the key length."""

    SAMPLED = "sampled"  # One random column per period
    AVERAGED = "averaged"  # Every column per period, deterministic


# ============================================================================
# Statistics Schemas
# ============================================================================


class FrequencyData(BaseModel):
    """Character frequency data."""

    character: str
    count: int
    frequency: float = Field(ge=0.0, le=1.0)


class StatisticsProfile(BaseModel):
    """Statistical profile of a text over the Spanish alphabet."""

    model_config = ConfigDict(from_attributes=True)

    length: int
    unique_chars: int
    character_frequencies: list[FrequencyData]
    index_of_coincidence: float
    entropy: float
    chi_squared: float | None = None


class PeriodScore(BaseModel):
    """Averaged Index of Coincidence for one trial period."""

    period: int
    index_of_coincidence: float


# ============================================================================
# Request Schemas
# ============================================================================


class AnalysisOptions(BaseModel):
    """Tuning for a ciphertext-only attack; unset fields use the settings."""

    strategy: KeyLengthStrategy | None = None
    seed: int | None = None
    max_key_length: int | None = Field(default=None, ge=1)
    key_length: int | None = Field(default=None, ge=1, description="Skip estimation")


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    ciphertext: str = Field(min_length=1)
    options: AnalysisOptions = Field(default_factory=AnalysisOptions)


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    key: str | None = None
    options: AnalysisOptions = Field(default_factory=AnalysisOptions)


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1)
    key: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    statistics: StatisticsProfile
    ic_profile: list[PeriodScore]
    key_length: int
    key: str
    plaintext: str
    confidence: float
    explanations: list[str]


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    confidence: float
    key_used: str
    key_length: int
    explanation: str


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    key_used: str


class AnalysisHistoryItem(BaseModel):
    """Single history item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ciphertext_hash: str
    ciphertext_preview: str
    key: str
    key_length: int
    confidence: float | None
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for /history endpoint."""

    items: list[AnalysisHistoryItem]
    total: int
    page: int
    page_size: int


class AnalysisDetailResponse(BaseModel):
    """Full analysis detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ciphertext_hash: str
    ciphertext: str
    statistics: dict[str, Any]
    ic_profile: list[dict[str, Any]]
    key_length: int
    key: str
    plaintext: str
    confidence: float | None
    parameters_used: dict[str, Any]
    explanations: list[str]
    created_at: datetime
    updated_at: datetime


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
