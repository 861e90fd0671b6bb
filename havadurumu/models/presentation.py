"""Mapping from condition text to emoji and background palette."""

from typing import NamedTuple

DEFAULT_EMOJI = "🌤️"
DEFAULT_PALETTE = ("#3182ce", "#4299e1", "#63b3ed")


class Presentation(NamedTuple):
    """How a condition is drawn: an emoji and a three-stop gradient."""

    emoji: str
    palette: tuple[str, str, str]


# Ordered, first match wins. Snow has its own emoji but keeps the default palette.
CONDITION_GROUPS: tuple[tuple[tuple[str, ...], Presentation], ...] = (
    (("rain", "yağmur"), Presentation("🌧️", ("#4a5568", "#2d3748", "#1a365d"))),
    (("cloud", "bulut"), Presentation("☁️", ("#718096", "#4a5568", "#2d3748"))),
    (("sun", "güneş", "clear"), Presentation("☀️", ("#4299e1", "#63b3ed", "#fbd38d"))),
    (("snow", "kar"), Presentation("❄️", DEFAULT_PALETTE)),
)

DEFAULT_PRESENTATION = Presentation(DEFAULT_EMOJI, DEFAULT_PALETTE)


def presentation_for(condition: str | None) -> Presentation:
    """Return the emoji and palette for a condition description."""
    cond = (condition or "").lower()
    for keywords, presentation in CONDITION_GROUPS:
        if any(keyword in cond for keyword in keywords):
            return presentation
    return DEFAULT_PRESENTATION
