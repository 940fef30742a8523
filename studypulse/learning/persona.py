"""
Tool: Persona Classifier
Purpose: Label the user's chronotype from the daily energy pattern

Compares average energy in the morning band (06-10h) with the evening band
(18-22h). A gap of more than half a point on the 1-5 scale decides between
early bird and night owl; anything closer is flexible. Without a daily
pattern there is no basis for a label and the persona is "inconsistent".

Usage:
    from studypulse.learning.persona import classify_persona
    persona = classify_persona(profile)
"""

from collections.abc import Iterable

from studypulse.learning.models import (
    EnergyPattern,
    EnergyProfile,
    PatternEntry,
    PatternType,
    PersonaType,
    UserPersona,
)
from studypulse.logging_config import get_logger

logger = get_logger(__name__)

MORNING_HOURS = (6, 10)
EVENING_HOURS = (18, 22)
PERSONA_MARGIN = 0.5

INSUFFICIENT_DATA_PERSONA = UserPersona(
    type=PersonaType.INCONSISTENT,
    characteristics=("Insufficient data for pattern recognition",),
    optimal_scheduling=("Start with flexible scheduling",),
    challenges=("Building consistent habits",),
    recommendations=("Track energy levels for a few more days",),
    confidence=0.1,
)

EARLY_BIRD_PERSONA = UserPersona(
    type=PersonaType.EARLY_BIRD,
    characteristics=(
        "High morning energy",
        "Prefers early starts",
        "Productive in first half of day",
    ),
    optimal_scheduling=("Schedule important tasks 6-10 AM", "Light tasks in afternoon"),
    challenges=("Maintaining energy in evenings", "Late deadlines"),
    recommendations=("Front-load your day", "Plan easier tasks for afternoons"),
    confidence=0.8,
)

NIGHT_OWL_PERSONA = UserPersona(
    type=PersonaType.NIGHT_OWL,
    characteristics=(
        "Higher evening energy",
        "Slow morning starts",
        "Peak performance later",
    ),
    optimal_scheduling=("Light tasks in morning", "Important work 6-10 PM"),
    challenges=("Morning commitments", "Early deadlines"),
    recommendations=("Save challenging work for evening", "Use mornings for routine tasks"),
    confidence=0.8,
)

FLEXIBLE_PERSONA = UserPersona(
    type=PersonaType.FLEXIBLE,
    characteristics=("Consistent energy throughout day", "Adaptable to schedules"),
    optimal_scheduling=("Balanced throughout day", "Can adapt to constraints"),
    challenges=("May lack strong optimization opportunities",),
    recommendations=("Focus on task prioritization", "Optimize based on other factors"),
    confidence=0.7,
)


def slot_hour(entry: PatternEntry) -> int:
    """Hour of a daily entry, parsed from its "H:00" / "HH:00" label."""
    return int(entry.time_slot.split(":", 1)[0])


def band_average(entries: Iterable[PatternEntry], band: tuple[int, int]) -> float:
    """Mean energy of the entries whose hour falls inside the band (inclusive)."""
    start, end = band
    matched = [e.average_energy for e in entries if start <= slot_hour(e) <= end]
    if not matched:
        return 0.0
    return sum(matched) / len(matched)


def classify_persona(source: EnergyProfile | Iterable[EnergyPattern]) -> UserPersona:
    """
    Classify the user as early bird, night owl, flexible, or inconsistent.

    Args:
        source: A profile, or its list of energy patterns

    Returns:
        UserPersona with fixed descriptive text for its type
    """
    patterns = source.energy_patterns if isinstance(source, EnergyProfile) else source
    daily = next((p for p in patterns if p.type == PatternType.DAILY), None)

    if daily is None:
        logger.debug("[PERSONA] No daily pattern yet")
        return INSUFFICIENT_DATA_PERSONA

    morning = band_average(daily.entries, MORNING_HOURS)
    evening = band_average(daily.entries, EVENING_HOURS)

    if morning > evening + PERSONA_MARGIN:
        persona = EARLY_BIRD_PERSONA
    elif evening > morning + PERSONA_MARGIN:
        persona = NIGHT_OWL_PERSONA
    else:
        persona = FLEXIBLE_PERSONA

    logger.debug(
        f"[PERSONA] morning={morning:.2f} evening={evening:.2f} -> {persona.type.value}"
    )
    return persona
