from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

# Resolution ranks: lower ranks are applied first, later ones override.
RANK_DATE = 1
RANK_DAY_OF_YEAR = 2
RANK_WEEK = 3
RANK_RELATIVE = 4
RANK_TIMESTAMP = 5
RANK_TIME = 6
RANK_ZONE = 7


class RelativeKind(enum.Enum):
    NOW = "now"
    TODAY_MIDNIGHT = "today_midnight"
    NOON = "noon"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"


@dataclass(frozen=True)
class Year:
    value: int
    rank: ClassVar[int] = RANK_DATE

@dataclass(frozen=True)
class Month:
    value: int  # 1-based, as written
    rank: ClassVar[int] = RANK_DATE

@dataclass(frozen=True)
class Day:
    value: int
    rank: ClassVar[int] = RANK_DATE

@dataclass(frozen=True)
class DayOfYear:
    value: int  # 1-based ordinal
    rank: ClassVar[int] = RANK_DAY_OF_YEAR

@dataclass(frozen=True)
class WeekOfYear:
    week: int
    day: Optional[int] = None  # 1..7 within the configured week
    rank: ClassVar[int] = RANK_WEEK

@dataclass(frozen=True)
class DayOfWeek:
    value: int  # 1..7 within the configured week
    rank: ClassVar[int] = RANK_WEEK

@dataclass(frozen=True)
class Relative:
    kind: RelativeKind
    rank: ClassVar[int] = RANK_RELATIVE

@dataclass(frozen=True)
class Timestamp:
    millis: int  # epoch milliseconds
    rank: ClassVar[int] = RANK_TIMESTAMP

@dataclass(frozen=True)
class Hours:
    value: int
    rank: ClassVar[int] = RANK_TIME

@dataclass(frozen=True)
class Minutes:
    value: int
    rank: ClassVar[int] = RANK_TIME

@dataclass(frozen=True)
class Seconds:
    value: int
    rank: ClassVar[int] = RANK_TIME

@dataclass(frozen=True)
class Fraction:
    millis: int
    rank: ClassVar[int] = RANK_TIME

@dataclass(frozen=True)
class Zone:
    name: str  # UTC, IRST, an IANA identifier ...
    rank: ClassVar[int] = RANK_ZONE

@dataclass(frozen=True)
class ZoneOffset:
    millis: int  # east of UTC is positive
    rank: ClassVar[int] = RANK_ZONE


Token = Union[
    Year, Month, Day, DayOfYear, WeekOfYear, DayOfWeek, Relative,
    Timestamp, Hours, Minutes, Seconds, Fraction, Zone, ZoneOffset,
]


@dataclass(frozen=True)
class ParseResult:
    """Tokens recognized in a string, plus the chunks that were skipped."""
    fields: Tuple[Token, ...]
    unrecognized: Tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        return bool(self.fields)

    def ordered(self) -> Tuple[Token, ...]:
        """Tokens in resolution order (stable within a rank)."""
        return tuple(sorted(self.fields, key=lambda t: t.rank))
