from pydantic import BaseModel, Field, StrictStr
from typing import Any, Dict, List, Optional
from datetime import datetime


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

    model_config = {"frozen": True}


class StringRecord(BaseModel):
    id: str  # SHA-256 of the original value
    value: str
    properties: StringProperties
    created_at: datetime

    model_config = {"frozen": True}


class FilterSet(BaseModel):
    """Optional criteria combined with AND. None means "not provided"."""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = Field(None, min_length=1)

    def applied(self) -> Dict[str, Any]:
        """Only the fields that were provided, zero values included"""
        return self.model_dump(exclude_none=True)


class QueryResult(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResult(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class ProfileUser(BaseModel):
    email: str
    name: str
    stack: str


class ProfileResponse(BaseModel):
    status: str = "success"
    user: ProfileUser
    timestamp: str
    fact: str
