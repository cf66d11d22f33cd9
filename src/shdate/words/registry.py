from __future__ import annotations
from typing import Dict, List, Sequence, Tuple

CATEGORIES: Tuple[str, ...] = (
    "day_short",
    "day_full",
    "month_short",
    "month_full",
    "meridiem_short",
    "meridiem_full",
    "animal",
    "constellation",
    "season",
    "solstice",
    "suffix",
)

WordTable = Dict[str, Sequence[str]]
_REGISTRY: Dict[str, WordTable] = {}

def register_language(language: str, table: WordTable, *, overwrite: bool = False) -> None:
    missing = [c for c in CATEGORIES if c not in table]
    if missing:
        raise ValueError(f"Word table for '{language}' is missing categories: {missing}")
    if (not overwrite) and (language in _REGISTRY):
        raise KeyError(f"Language '{language}' already exists. Use overwrite=True to replace.")
    _REGISTRY[language] = table

def check_language(language: str) -> bool:
    return language in _REGISTRY

def list_languages() -> List[str]:
    return sorted(_REGISTRY)

def table(language: str) -> WordTable:
    if language not in _REGISTRY:
        raise KeyError(f"Unknown language '{language}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[language]

def words_for(category: str, index: int, language: str) -> str:
    """Word `index` of `category`; the index convention of each category is the caller's."""
    if category not in CATEGORIES:
        raise KeyError(f"Unknown word category '{category}'. Available: {list(CATEGORIES)}")
    return table(language)[category][index]


# index conventions shared by the formatter and the parser

def day_index(weekday: int, first_day_of_week: int = 0) -> int:
    """Tables are Saturday-first; weekday is counted from the configured first day."""
    return (weekday + first_day_of_week) % 7

def meridiem_index(hour: int) -> int:
    return 0 if hour < 12 else 1

def animal_index(year: int) -> int:
    # 1403 is the year of the Dragon
    return (year + 5) % 12

def season_index(month: int) -> int:
    return month // 3

def solstice_index(month: int, day: int) -> int:
    """0 = none, then equinox/solstice on Farvardin 1, Tir 1, Mehr 1 and Dey 1."""
    if day == 1 and month % 3 == 0:
        return month // 3 + 1
    return 0

def suffix_index(day: int) -> int:
    """0 = default, 1/2/3 = st/nd/rd style endings (11..13 take the default)."""
    if 11 <= day % 100 <= 13:
        return 0
    return day % 10 if day % 10 in (1, 2, 3) else 0
