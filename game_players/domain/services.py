"""Domain rules for players.

Field validation and the level formulas live here as static rule classes so
the service layer and the request schemas share a single definition.
"""

import math
from datetime import date
from typing import Optional

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30

MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000

MIN_LEVEL = 1
MAX_LEVEL = 999

MIN_UNTIL_NEXT_LEVEL = 0
MAX_UNTIL_NEXT_LEVEL = 10_000_000

# Birthdays from the first day of this year up to, not including, the upper one.
MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000


def _in_range(value: Optional[int], low: int, high: int) -> bool:
    return value is not None and low <= value <= high


class PlayerRules:
    """Validation rules for individual player fields."""

    @staticmethod
    def is_name_valid(name: Optional[str]) -> bool:
        return name is not None and 0 < len(name) <= NAME_MAX_LENGTH

    @staticmethod
    def is_title_valid(title: Optional[str]) -> bool:
        return title is not None and 0 < len(title) <= TITLE_MAX_LENGTH

    @staticmethod
    def is_birthday_valid(birthday: Optional[date]) -> bool:
        return (
            birthday is not None
            and MIN_BIRTHDAY_YEAR <= birthday.year < MAX_BIRTHDAY_YEAR
        )

    @staticmethod
    def is_experience_valid(experience: Optional[int]) -> bool:
        return _in_range(experience, MIN_EXPERIENCE, MAX_EXPERIENCE)

    @staticmethod
    def is_level_valid(level: Optional[int]) -> bool:
        return _in_range(level, MIN_LEVEL, MAX_LEVEL)

    @staticmethod
    def is_until_next_level_valid(until_next_level: Optional[int]) -> bool:
        return _in_range(until_next_level, MIN_UNTIL_NEXT_LEVEL, MAX_UNTIL_NEXT_LEVEL)


class LevelRules:
    """Level progression formulas."""

    @staticmethod
    def compute_level(experience: int) -> int:
        """Level reached with ``experience`` points.

        ``floor((sqrt(2500 + 200 * experience) - 50) / 100)``, computed with
        integer square roots so large values are exact.
        """
        return (math.isqrt(2500 + 200 * experience) - 50) // 100

    @staticmethod
    def compute_until_next_level(level: int, experience: int) -> int:
        """Experience still missing to reach ``level + 1``."""
        return 50 * (level + 1) * (level + 2) - experience
