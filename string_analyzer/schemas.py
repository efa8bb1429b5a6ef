from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone

# Largest value SQLite can bind as INTEGER
MAX_SQL_INTEGER = 2**63 - 1


class StringCreate(BaseModel):
    value: Any = Field(None, description="String to analyze")


class StringFilters(BaseModel):
    """Optional predicates over stored strings, combined with AND"""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; they were stored as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def from_record(cls, record) -> "StringResponse":
        return cls(
            id=record.id,
            value=record.value,
            properties=StringProperties(
                length=record.length,
                is_palindrome=record.is_palindrome,
                unique_characters=record.unique_characters,
                word_count=record.word_count,
                sha256_hash=record.id,
                character_frequency_map=record.character_frequency_map
            ),
            created_at=record.created_at
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
