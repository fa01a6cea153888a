"""
PURPOSE: Registry for game variants.
         Maps variant keys (e.g., 'classic', 'word') to the set of optional
         systems a session runs with. To add a variant, add an entry to
         GAME_VARIANTS and a description in list_variants().
"""

from typing import Dict, FrozenSet, Optional

from .constants import FOOD, BOOSTERS, WORD_PUZZLE, ALL_SYSTEMS

DEFAULT_VARIANT = "boosters"

GAME_VARIANTS: Dict[str, FrozenSet[str]] = {
    "classic": frozenset(),
    "food": frozenset({FOOD}),
    "boosters": frozenset({FOOD, BOOSTERS}),
    "word": frozenset({WORD_PUZZLE, BOOSTERS}),
}

AVAILABLE_VARIANTS = list(GAME_VARIANTS.keys())


def get_variant_systems(variant_key: Optional[str] = None) -> FrozenSet[str]:
    """
    Get the systems enabled by a variant key.

    Args:
        variant_key: One of AVAILABLE_VARIANTS. If None or empty, returns the default.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in GAME_VARIANTS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown game variant '{variant_key}'. Available variants: {available}"
        )

    return GAME_VARIANTS[variant_key]


def parse_systems(raw: str) -> FrozenSet[str]:
    """Parse a comma separated list such as 'food,boosters'."""
    systems = frozenset(part.strip().lower() for part in raw.split(",") if part.strip())
    unknown = systems - ALL_SYSTEMS
    if unknown:
        raise ValueError(
            f"Unknown game system(s): {', '.join(sorted(unknown))}. "
            f"Available systems: {', '.join(sorted(ALL_SYSTEMS))}"
        )
    return systems


def list_variants() -> list:
    """Return metadata about all available variants."""
    return [
        {"key": "classic", "description": "Snake and walls only"},
        {"key": "food", "description": "Eat food to grow; win by eating a tenth of the board"},
        {"key": "boosters", "description": "Food plus speed, shrink and extra-life boosters"},
        {"key": "word", "description": "Guess the hidden word by eating the right letters"},
    ]
