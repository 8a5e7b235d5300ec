"""
Explanation templates for FSP.

These templates provide human-readable interpretations
of the total score and its factors.
"""

from fsp.core.types import Band


# Base explanation templates by band
BAND_TEMPLATES: dict[Band, str] = {
    Band.GREEN: "Most factors are in their most favourable range.",
    Band.BLUE: "The profile is good, with a few factors below their best.",
    Band.ORANGE: "Several factors score below their favourable range.",
    Band.RED: "Many factors score low.",
    Band.BLACK: "Nearly every factor scores at or near zero.",
}

# Display labels per factor key
FACTOR_LABELS: dict[str, str] = {
    "age": "Age",
    "bmi": "BMI",
    "marriage": "Marriage duration",
    "lifestyle": "Lifestyle",
    "menstruation": "Menstruation pattern",
    "sex": "Sexual intercourse",
    "diagnosis": "Diagnosis",
    "ovulation": "Ovulation pattern",
    "stress": "Stress level",
    "sleep": "Sleep quality",
    "diet": "Diet quality",
    "substance": "Substance use",
    "familyHistory": "Family history",
}

# Scoring hints shown under the numeric fields
RANGE_HINTS: dict[str, str] = {
    "age": "21–30 → 3, 31–35 → 2, 36–40 → 1, >40 → 0",
    "bmi": "24–28 → 3, 29–35 → 2, <22 → 1, >35 → 0",
    "marriage": "2 → 3, 3–5 → 2, 6–7 → 1, >7 → 0",
}
