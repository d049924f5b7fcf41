"""
AQI classification.

Maps a raw AQI value onto the category label and severity shown to the
operator.  Pure functions, no I/O.
"""
from __future__ import annotations

import enum
import math


class AqiSeverity(str, enum.Enum):
    """Severity bucket of an AQI value, ordered from best to worst."""

    UNKNOWN = "unknown"
    GOOD = "good"
    MODERATE = "moderate"
    UNHEALTHY_SG = "unhealthy_sg"
    UNHEALTHY_PLUS = "unhealthy_plus"


LABEL_UNKNOWN = "N/A"
LABEL_WORST = "Unhealthy+"

# (exclusive upper bound, label, severity), evaluated in order
AQI_THRESHOLDS: tuple[tuple[float, str, AqiSeverity], ...] = (
    (50, "Good", AqiSeverity.GOOD),
    (100, "Moderate", AqiSeverity.MODERATE),
    (150, "Unhealthy (SG)", AqiSeverity.UNHEALTHY_SG),
)

AQI_LABELS: list[str] = [LABEL_UNKNOWN] + [label for _, label, _ in AQI_THRESHOLDS] + [LABEL_WORST]


def classify(aqi: float | None) -> tuple[str, AqiSeverity]:
    """Return (label, severity) for the given AQI; None and NaN are unknown."""
    if aqi is None or math.isnan(aqi):
        return LABEL_UNKNOWN, AqiSeverity.UNKNOWN
    for upper, label, severity in AQI_THRESHOLDS:
        if aqi < upper:
            return label, severity
    return LABEL_WORST, AqiSeverity.UNHEALTHY_PLUS


def format_badge(aqi: float | None) -> str:
    """Render the badge text, e.g. 'Moderate · 72'."""
    label, severity = classify(aqi)
    if severity is AqiSeverity.UNKNOWN:
        return label
    return f"{label} · {aqi:g}"
