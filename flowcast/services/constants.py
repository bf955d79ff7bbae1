"""
Constants and shared data for cycle-related services.
"""
from typing import Dict
from flowcast.models.phase import CyclePhase

DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5

# Ovulation is assumed this many days before the next period
LUTEAL_PHASE_LENGTH = 14

# Fertile window ends on ovulation day and starts this many days earlier
FERTILE_WINDOW_LEAD_DAYS = 5

MIN_CYCLE_LENGTH = 18
MAX_CYCLE_LENGTH = 45
MIN_PERIOD_LENGTH = 2
MAX_PERIOD_LENGTH = 8

# Older period streaks are ignored when averaging
MAX_RECENT_STREAKS = 6

# Phase classification never places ovulation earlier than this cycle day
MIN_OVULATION_DAY = 12

# Half-width of the ovulation bucket used by phase keys
OVULATION_KEY_MARGIN = 1

# Cycles walked forward from the anchor when rebuilding past period days
MAX_HISTORY_CYCLES = 10

PHASE_INSIGHTS: Dict[CyclePhase, Dict[str, str]] = {
    CyclePhase.MENSTRUAL: {
        "emoji": "🩸",
        "title": "Menstrual Phase",
        "tip": "Rest and recovery time. Stay hydrated and practice gentle movement like yoga or walking."
    },
    CyclePhase.FOLLICULAR: {
        "emoji": "🌱",
        "title": "Follicular Phase",
        "tip": "Your energy is rising! This is a great time for workouts, new projects, and social activities."
    },
    CyclePhase.OVULATION: {
        "emoji": "✨",
        "title": "Ovulation Phase",
        "tip": "Peak confidence and energy! Perfect time for important meetings and challenging tasks."
    },
    CyclePhase.LUTEAL: {
        "emoji": "🌙",
        "title": "Luteal Phase",
        "tip": "Slow down and focus inward. Great for planning, reflection, and self-care routines."
    }
}
