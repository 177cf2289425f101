"""Pydantic models for API request/response schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Question(BaseModel):
    """One entry of the "Question" array."""

    name: str
    type: int


class Answer(BaseModel):
    """One entry of the "Answer" array."""

    name: str
    type: int
    TTL: int
    data: str


class DoHResponse(BaseModel):
    """Response document in the DNS-over-HTTPS JSON layout."""

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(alias="Status")
    truncated: bool = Field(alias="TC")
    recursion_desired: bool = Field(alias="RD")
    recursion_available: bool = Field(alias="RA")
    authenticated_data: bool = Field(alias="AD")
    checking_disabled: bool = Field(alias="CD")
    question: Optional[List[Question]] = Field(default=None, alias="Question")
    answer: Optional[List[Answer]] = Field(default=None, alias="Answer")
    comment: Optional[str] = None


class QueryStatisticsResponse(BaseModel):
    """Counters reported by the health check."""

    total_queries: int
    successful_queries: int
    failed_queries: int
    average_response_time_ms: float
    success_rate: float
