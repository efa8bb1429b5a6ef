from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text
from datetime import datetime, timezone

from string_analyzer.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class StringRecord(Base):
    __tablename__ = "strings"

    id = Column(String(64), primary_key=True)  # SHA-256 hash of value
    value = Column(Text, unique=True, nullable=False)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<StringRecord {self.id[:12]} {self.value!r}>"
