# phatfit/schemas/record.py
"""
Pydantic schemas for fitness records.
A record is one dated log entry; every field is optional so clients can log
just a weigh-in, just a meal total, or just a workout.
"""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Exercise", "Record"]

class Exercise(BaseModel):
    """One strength-training entry inside a record."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str  # Exercise name, e.g. "Bench press"
    sets: Optional[float] = None
    reps: Optional[float] = None
    weight: Optional[float] = None  # Weight lifted

class Record(BaseModel):
    """
    One fitness log entry.
    Used both as the POST /api/records body and as the stored/returned shape.
    Unknown keys in the request body are ignored.
    """
    model_config = ConfigDict(allow_inf_nan=False)  # NaN/Infinity are not valid JSON measurements

    date: Optional[datetime] = None  # When the entry applies (not necessarily when it was logged)
    weight: Optional[float] = None  # Body weight
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    exercises: List[Exercise] = Field(default_factory=list)

    def to_document(self) -> dict:
        """JSON-ready dict for the embedded records column (unset/null fields dropped)."""
        return self.model_dump(mode="json", exclude_none=True)
