"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum
from pydantic import BaseModel

class CyclePhase(str, Enum):
    """
    Cycle phase keys.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"

class CyclePhaseLabel(str, Enum):
    """
    Display labels for cycle phases.

    The fertile label covers a wider window than the ovulation key.
    """
    MENSTRUAL = "Menstrual"
    FOLLICULAR = "Follicular"
    FERTILE = "Fertile"
    LUTEAL = "Luteal"

class PhaseInsight(BaseModel):
    """
    Short guidance shown alongside the current phase.
    """
    phase: CyclePhase
    emoji: str
    title: str
    tip: str
