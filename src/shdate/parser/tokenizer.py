"""
shdate.parser.tokenizer
-----------------------
Turns a free-form date string into typed tokens.

The scanner walks the string left to right. At each position it tries an
ordered table of compiled regular expressions (most specific first) and the
first one that matches produces tokens and advances the position. Text that no
pattern accepts is skipped one chunk (a run of non-space characters) at a time
and reported in `ParseResult.unrecognized`.

Numeric dates are read as solar Hijri dates. Persian and Arabic-Indic digits
are accepted anywhere.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from re import Match, Pattern
from typing import Callable, Dict, List, Optional, Tuple

from ..words import standard as _standard  # noqa: F401  (registers the built-in word tables)
from ..words.registry import list_languages, table
from .tokens import (
    Day,
    DayOfWeek,
    DayOfYear,
    Fraction,
    Hours,
    Minutes,
    Month,
    ParseResult,
    Relative,
    RelativeKind,
    Seconds,
    Timestamp,
    Token,
    WeekOfYear,
    Year,
    Zone,
    ZoneOffset,
)

logger = logging.getLogger(__name__)

_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

def normalize_digits(text: str) -> str:
    return text.translate(_DIGITS)


# Latin spellings seen in the wild, on top of the registered month names
MONTH_ALIASES: Dict[str, int] = {
    "farvardin": 0, "ordibehesht": 1, "ordibehest": 1, "khordad": 2, "tir": 3,
    "mordad": 4, "amordad": 4, "shahrivar": 5, "mehr": 6, "aban": 7, "abaan": 7,
    "azar": 8, "aazar": 8, "dey": 9, "dei": 9, "bahman": 10, "esfand": 11, "esfend": 11,
}

RELATIVE_WORDS: Dict[str, RelativeKind] = {
    "now": RelativeKind.NOW,
    "today": RelativeKind.TODAY_MIDNIGHT,
    "midnight": RelativeKind.TODAY_MIDNIGHT,
    "noon": RelativeKind.NOON,
    "yesterday": RelativeKind.YESTERDAY,
    "tomorrow": RelativeKind.TOMORROW,
    "اکنون": RelativeKind.NOW,
    "الان": RelativeKind.NOW,
    "امروز": RelativeKind.TODAY_MIDNIGHT,
    "نیمه‌شب": RelativeKind.TODAY_MIDNIGHT,
    "ظهر": RelativeKind.NOON,
    "دیروز": RelativeKind.YESTERDAY,
    "فردا": RelativeKind.TOMORROW,
}

# zone abbreviations that name a fixed offset (milliseconds east of UTC)
FIXED_ZONES: Dict[str, int] = {
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "IRST": 12_600_000,   # +03:30
    "IRDT": 16_200_000,   # +04:30
}

_IANA_RE = re.compile(r"^[A-Za-z]+(?:/[A-Za-z0-9_+\-]+)+$")


@lru_cache(maxsize=8)
def _month_names(languages: Tuple[str, ...]) -> Dict[str, int]:
    names: Dict[str, int] = dict(MONTH_ALIASES)
    for lang in languages:
        words = table(lang)
        for cat in ("month_full", "month_short"):
            for i, name in enumerate(words[cat]):
                names.setdefault(name.lower(), i)
    return names

@lru_cache(maxsize=8)
def _day_names(languages: Tuple[str, ...]) -> Dict[str, int]:
    """Weekday name -> Saturday-first index."""
    names: Dict[str, int] = {}
    for lang in languages:
        words = table(lang)
        for cat in ("day_full", "day_short"):
            for i, name in enumerate(words[cat]):
                # one-letter Persian abbreviations are too ambiguous to parse
                if len(name) > 1:
                    names.setdefault(name.lower(), i)
    return names

@lru_cache(maxsize=8)
def _textual_pattern(languages: Tuple[str, ...]) -> Pattern[str]:
    alternation = "|".join(
        re.escape(n) for n in sorted(_month_names(languages), key=len, reverse=True)
    )
    return re.compile(
        r"(?:(?P<d1>\d{1,2})(?:st|nd|rd|th)?,?\s+)?"
        r"(?P<mon>" + alternation + r")(?![^\W\d_])\.?"
        r"(?:\s+(?P<d2>\d{1,2})(?:st|nd|rd|th)?(?![\d:]))?"
        r"(?:,?\s+(?P<y>\d{4})(?!\d))?",
        re.IGNORECASE,
    )


# ---------------------------------------------------------
# Numeric patterns, tried in this order
# ---------------------------------------------------------

Handler = Callable[[Match[str]], List[Token]]

def _ymd(m: Match[str]) -> List[Token]:
    return [Year(int(m["y"])), Month(int(m["m"])), Day(int(m["d"]))]

def _ym(m: Match[str]) -> List[Token]:
    return [Year(int(m["y"])), Month(int(m["m"]))]

def _ordinal(m: Match[str]) -> List[Token]:
    return [Year(int(m["y"])), DayOfYear(int(m["doy"]))]

def _iso_week(m: Match[str]) -> List[Token]:
    day = int(m["wd"]) if m["wd"] else None
    out: List[Token] = [Year(int(m["y"])), WeekOfYear(int(m["w"]), day)]
    if day is not None:
        out.append(DayOfWeek(day))
    return out

def _timestamp(m: Match[str]) -> List[Token]:
    seconds, _, frac = m["ts"].partition(".")
    sign = -1 if seconds.startswith("-") else 1
    millis = int(seconds) * 1000 + sign * int((frac + "000")[:3])
    return [Timestamp(millis)]

def _time(m: Match[str]) -> List[Token]:
    hour = int(m["H"])
    ampm = (m["ap"] or "").replace(".", "").lower()
    if ampm == "am" and hour == 12:
        hour = 0
    elif ampm == "pm" and hour < 12:
        hour += 12
    out: List[Token] = [Hours(hour), Minutes(int(m["I"]))]
    if m["S"] is not None:
        out.append(Seconds(int(m["S"])))
    if m["f"] is not None:
        out.append(Fraction(int((m["f"] + "00")[:3])))
    return out

def _offset(m: Match[str]) -> List[Token]:
    sign = -1 if m["sign"] == "-" else 1
    minutes = int(m["hh"]) * 60 + int(m["mm"] or 0)
    return [ZoneOffset(sign * minutes * 60_000)]

NUMERIC_PATTERNS: List[Tuple[str, Pattern[str], Handler]] = [
    ("timestamp", re.compile(r"@(?P<ts>-?\d+(?:\.\d+)?)"), _timestamp),
    ("iso_week", re.compile(r"(?P<y>\d{4})-?W(?P<w>\d{1,2})(?:-?(?P<wd>[1-7]))?(?!\d)", re.I), _iso_week),
    ("ymd", re.compile(r"(?P<y>\d{4})(?P<sep>[-/.])(?P<m>\d{1,2})(?P=sep)(?P<d>\d{1,2})(?!\d)(?:T(?=\d))?"), _ymd),
    ("ymd_compact", re.compile(r"(?P<y>\d{4})(?P<m>\d{2})(?P<d>\d{2})(?!\d)(?:T(?=\d))?"), _ymd),
    ("ordinal", re.compile(r"(?P<y>\d{4})[-.]?(?P<doy>\d{3})(?!\d)"), _ordinal),
    ("dmy", re.compile(r"(?P<d>\d{1,2})(?P<sep>[-/.])(?P<m>\d{1,2})(?P=sep)(?P<y>\d{4})(?!\d)"), _ymd),
    ("ym", re.compile(r"(?P<y>\d{4})[-/](?P<m>\d{1,2})(?![\d/.-])"), _ym),
    ("time", re.compile(
        r"(?P<H>\d{1,2}):(?P<I>\d{2})(?::(?P<S>\d{2})(?:[.,](?P<f>\d{1,9}))?)?(?!\d)"
        r"(?:\s*(?P<ap>[ap]\.?m\.?)(?![^\W\d_]))?",
        re.I,
    ), _time),
    ("offset", re.compile(r"(?P<sign>[+-])(?P<hh>\d{2})(?::?(?P<mm>\d{2}))?(?!\d)"), _offset),
]

_YEAR_RE = re.compile(r"(?P<y>\d{4})(?!\d)")
_WORD_RE = re.compile(r"[^\W\d_][\w\u200c]*(?:/[\w+\-]+)*")
_SKIP_RE = re.compile(r"[\s,;]+")
_CHUNK_RE = re.compile(r"\S+?(?=[\s,;]|$)")


def _word_tokens(word: str, languages: Tuple[str, ...], first_day_of_week: int) -> Optional[List[Token]]:
    key = word.lower()
    if key in RELATIVE_WORDS:
        return [Relative(RELATIVE_WORDS[key])]
    days = _day_names(languages)
    if key in days:
        return [DayOfWeek((days[key] - first_day_of_week) % 7 + 1)]
    if word.upper() in FIXED_ZONES:
        return [Zone(word.upper())]
    if _IANA_RE.match(word):
        return [Zone(word)]
    return None


def tokenize(text: str, first_day_of_week: int = 0) -> ParseResult:
    """
    Scan `text` into tokens. Weekday names are numbered from `first_day_of_week`
    (0 = Saturday).
    """
    s = normalize_digits(text).strip()
    languages = tuple(list_languages())
    textual = _textual_pattern(languages)
    months = _month_names(languages)

    fields: List[Token] = []
    skipped: List[str] = []
    pos = 0
    while pos < len(s):
        sep = _SKIP_RE.match(s, pos)
        if sep:
            pos = sep.end()
            continue

        for name, rx, handler in NUMERIC_PATTERNS:
            m = rx.match(s, pos)
            if m:
                logger.debug("%s matched %r", name, m.group(0))
                fields.extend(handler(m))
                pos = m.end()
                break
        else:
            m = textual.match(s, pos)
            if m:
                logger.debug("textual date matched %r", m.group(0))
                day = m["d1"] or m["d2"]
                if m["y"]:
                    fields.append(Year(int(m["y"])))
                fields.append(Month(months[m["mon"].lower()] + 1))
                if day:
                    fields.append(Day(int(day)))
                pos = m.end()
                continue

            m = _YEAR_RE.match(s, pos)
            if m:
                fields.append(Year(int(m["y"])))
                pos = m.end()
                continue

            m = _WORD_RE.match(s, pos)
            if m:
                toks = _word_tokens(m.group(0), languages, first_day_of_week)
                if toks is not None:
                    logger.debug("word %r -> %s", m.group(0), toks)
                    fields.extend(toks)
                    pos = m.end()
                    continue

            chunk = _CHUNK_RE.match(s, pos)
            end = chunk.end() if chunk and chunk.end() > pos else pos + 1
            logger.debug("skipping unrecognized %r", s[pos:end])
            skipped.append(s[pos:end])
            pos = end

    return ParseResult(tuple(fields), tuple(skipped))


def parse_fields(text: str, first_day_of_week: int = 0) -> ParseResult:
    return tokenize(text, first_day_of_week)
