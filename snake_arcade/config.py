"""
Runtime configuration for Snake Arcade.

Values come from the environment (a local .env file is loaded with
python-dotenv) and can be overridden by command line flags.
"""

import os
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional

from dotenv import load_dotenv

from domain.constants import (
    NORMAL_SPEED,
    BOOSTED_SPEED,
    SPEED_DURATION,
    BOOSTER_RESPAWN_TIME,
    TARGET_FPS,
    WORD_LIST,
)
from domain.variants import get_variant_systems, parse_systems, DEFAULT_VARIANT


@dataclass(frozen=True)
class GameConfig:
    systems: FrozenSet[str] = field(default_factory=lambda: get_variant_systems(DEFAULT_VARIANT))
    normal_speed: float = NORMAL_SPEED
    boosted_speed: float = BOOSTED_SPEED
    speed_duration: float = SPEED_DURATION
    booster_respawn_time: float = BOOSTER_RESPAWN_TIME
    fps: int = TARGET_FPS
    seed: Optional[int] = None
    music_path: Optional[str] = None
    words: tuple = WORD_LIST

    def __post_init__(self):
        for name in ("normal_speed", "boosted_speed", "speed_duration", "booster_respawn_time"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def has(self, system: str) -> bool:
        return system in self.systems

    def with_overrides(self, **overrides) -> "GameConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(cls) -> "GameConfig":
        load_dotenv()

        systems_raw = os.getenv("SNAKE_SYSTEMS")
        if systems_raw is not None:
            systems = parse_systems(systems_raw)
        else:
            systems = get_variant_systems(os.getenv("SNAKE_VARIANT"))

        seed = os.getenv("SNAKE_SEED")
        return cls(
            systems=systems,
            normal_speed=float(os.getenv("SNAKE_NORMAL_SPEED", NORMAL_SPEED)),
            boosted_speed=float(os.getenv("SNAKE_BOOSTED_SPEED", BOOSTED_SPEED)),
            speed_duration=float(os.getenv("SNAKE_SPEED_DURATION", SPEED_DURATION)),
            booster_respawn_time=float(os.getenv("SNAKE_BOOSTER_RESPAWN", BOOSTER_RESPAWN_TIME)),
            fps=int(os.getenv("SNAKE_FPS", TARGET_FPS)),
            seed=int(seed) if seed else None,
            music_path=os.getenv("SNAKE_MUSIC_PATH") or None,
        )
