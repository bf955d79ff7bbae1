"""
Daily log model definition for tracking bleeding, mood and symptoms.
"""
from enum import Enum
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

class BleedingIntensity(str, Enum):
    """
    Bleeding intensity recorded for a day.
    """
    NONE = "none"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

class Mood(str, Enum):
    """
    Mood recorded for a day.
    """
    HAPPY = "happy"
    CALM = "calm"
    SAD = "sad"
    ANXIOUS = "anxious"
    IRRITABLE = "irritable"
    TIRED = "tired"

class Symptom(str, Enum):
    """
    Symptoms a user can attach to a daily log.
    """
    CRAMPS = "cramps"
    HEADACHE = "headache"
    BLOATING = "bloating"
    FATIGUE = "fatigue"
    ACNE = "acne"
    BACKACHE = "backache"
    NAUSEA = "nausea"
    TENDER_BREASTS = "tender_breasts"
    MOOD = "mood"
    ENERGY = "energy"
    SLEEP = "sleep"

class DailyLog(BaseModel):
    """
    Represents a single day logged by the user.

    Only ``date`` and ``bleeding_intensity`` feed the prediction engine; the
    remaining fields are carried through untouched.
    """
    id: Optional[str] = None
    user_id: Optional[str] = None
    date: date
    bleeding_intensity: Optional[BleedingIntensity] = None
    mood: Optional[Mood] = None
    symptoms: List[Symptom] = Field(default_factory=list)
    notes: Optional[str] = None
    water_intake: Optional[int] = Field(None, ge=0, le=20)

    @field_validator("symptoms", mode="before")
    @classmethod
    def _none_symptoms_as_empty(cls, value):
        return value or []

    @property
    def is_bleeding_day(self) -> bool:
        """Check if any bleeding was recorded for this day."""
        return (
            self.bleeding_intensity is not None
            and self.bleeding_intensity != BleedingIntensity.NONE
        )
