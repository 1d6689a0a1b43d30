from enum import Enum
from typing import Optional, Union


class SeasonTag(int, Enum):
    """Competition seasons the dashboard has data for, keyed by year."""

    RISE = 2019
    FORWARD = 2020
    GAME_CHANGERS = 2021
    ENERGIZE = 2022
    IN_SHOW = 2023
    INTO_THE_DEEP = 2024
    AGE = 2025

    @property
    def route_slug(self) -> str:
        """Path segment of the season's team dashboard."""
        return _ROUTE_SLUGS[self]

    @classmethod
    def latest(cls) -> "SeasonTag":
        return max(cls)

    @classmethod
    def from_year(
        cls,
        value: Union[int, str, None],
        default: Optional["SeasonTag"] = None,
    ) -> "SeasonTag":
        """Parses a year such as 2024 or "2024"; unknown years fall back to default."""
        fallback = default if default is not None else cls.latest()
        if value is None:
            return fallback
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return fallback


_ROUTE_SLUGS = {
    SeasonTag.RISE: "rise",
    SeasonTag.FORWARD: "forward",
    SeasonTag.GAME_CHANGERS: "gameChangers",
    SeasonTag.ENERGIZE: "energize",
    SeasonTag.IN_SHOW: "inShow",
    SeasonTag.INTO_THE_DEEP: "intothedeep",
    SeasonTag.AGE: "age",
}
