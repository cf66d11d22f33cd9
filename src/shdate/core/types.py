from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Tuple

@dataclass(frozen=True)
class SolarDate:
    year: int
    month: int  # 0 = Farvardin .. 11 = Esfand
    day: int

    def astuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month + 1:02d}/{self.day:02d}"

@dataclass(frozen=True)
class GregorianDate:
    year: int
    month: int  # 0 = January .. 11 = December
    day: int

    def astuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        """Only valid for years 1..9999 (datetime.date range)."""
        return date(self.year, self.month + 1, self.day)

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month - 1, d.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"

@dataclass(frozen=True)
class IsoWeek:
    year: int
    week: int  # 1..53

    def astuple(self) -> Tuple[int, int]:
        return (self.year, self.week)

@dataclass(frozen=True)
class DateTimeFields:
    """Native proleptic Gregorian fields of an instant (month is 0-based)."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
