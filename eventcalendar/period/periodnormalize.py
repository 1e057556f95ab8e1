"""Period Label Normalization
--------------------------

Helpers that normalize and pick apart period labels before they are resolved
to Period objects by ``periodapi.period_identifier``.

Examples:
  >>> normalize_period_text("  Mar  2025 ")
  'mar 2025'

  >>> normalize_period_text("2025–W11")
  '2025-w11'

  >>> extract_relative("last month")
  (-1, 'month')
"""

import re
import unicodedata

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

RELATIVE_UNITS = ("minute", "hour", "day", "week", "month", "year")

# Single-word relative labels, resolved as day offsets
RELATIVE_DAYS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}


def normalize_period_text(text: str) -> str:
    """
    Normalize a period label for consistent parsing.

    Transformations:
      - Strip whitespace and lowercase
      - Unicode normalization (NFC)
      - Dash variants (—, –, −, ‒) become "-"
      - Spaces around hyphens are removed
      - Runs of whitespace collapse to one space

    Examples:
        >>> normalize_period_text("Week 2025 – W11")
        'week 2025-w11'

        >>> normalize_period_text("2025-03-15   10:00")
        '2025-03-15 10:00'
    """
    if not text:
        return ""

    text = text.strip().lower()
    text = unicodedata.normalize("NFC", text)

    for dash in ("—", "–", "−", "‒"):
        text = text.replace(dash, "-")

    text = re.sub(r"\s*-\s*", "-", text)
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def extract_year(text: str) -> int | None:
    """
    Extract a 4-digit year (1900-2199).

    Examples:
        >>> extract_year("mar 2025")
        2025

        >>> extract_year("today")
    """
    match = re.search(r"(?<!\d)(19\d{2}|20\d{2}|21\d{2})(?!\d)", text)
    if match:
        return int(match.group(1))
    return None


def extract_year_month(text: str) -> tuple[int | None, int | None]:
    """
    Extract a numeric year-month ("2025-03", "2025/3").

    Examples:
        >>> extract_year_month("2025-03")
        (2025, 3)

        >>> extract_year_month("2025-03-15")
        (None, None)
    """
    match = re.fullmatch(r"(\d{4})[-/](0?[1-9]|1[0-2])", text)
    if match:
        return (int(match.group(1)), int(match.group(2)))
    return (None, None)


def extract_date(text: str) -> tuple[int, int, int] | None:
    """
    Extract an ISO date at the start of the label ("2025-03-15").

    Examples:
        >>> extract_date("2025-03-15 10:00")
        (2025, 3, 15)
    """
    match = re.match(r"(\d{4})-(\d{1,2})-(\d{1,2})\b", text)
    if match:
        return (int(match.group(1)), int(match.group(2)), int(match.group(3)))
    return None


def extract_time(text: str) -> tuple[int, int | None] | None:
    """
    Extract a time of day following a date: "10:00", "10:30", "10h".

    Returns:
        (hour, minute) where minute is None for an hour-only label ("10h"),
        or None when the label has no time part

    Examples:
        >>> extract_time("2025-03-15 10:30")
        (10, 30)

        >>> extract_time("2025-03-15 10h")
        (10, None)
    """
    match = re.search(r"[ t]([01]?\d|2[0-3]):([0-5]\d)(?::\d{2})?$", text)
    if match:
        return (int(match.group(1)), int(match.group(2)))

    match = re.search(r"[ t]([01]?\d|2[0-3])h$", text)
    if match:
        return (int(match.group(1)), None)

    return None


def extract_month_name(text: str, threshold: int = 85) -> int | None:
    """
    Extract a month number from a (possibly misspelled) month name.

    Abbreviations of three letters or more match exactly; anything else is
    scored against the full names with RapidFuzz.

    Args:
        text: Normalized period text
        threshold: Minimum fuzzy score (0-100) for a misspelled name

    Examples:
        >>> extract_month_name("mar 2025")
        3

        >>> extract_month_name("febuary 2024")
        2

        >>> extract_month_name("2025-w11")
    """
    for word in re.findall(r"[a-z]+", text):
        if len(word) < 3:
            continue
        for name, number in MONTH_NAMES.items():
            if name.startswith(word):
                return number

        match = process.extractOne(word, list(MONTH_NAMES), scorer=fuzz.ratio)
        if match and match[1] >= threshold:
            return MONTH_NAMES[match[0]]

    return None


def extract_iso_week(text: str) -> tuple[int | None, int | None]:
    """
    Extract an ISO week label.

    Supports formats:
      - 2025-W11
      - 2025W11
      - W11 2025

    Examples:
        >>> extract_iso_week("2025-w11")
        (2025, 11)

        >>> extract_iso_week("w11 2025")
        (2025, 11)
    """
    match = re.search(r"\b(\d{4})-?w(0?[1-9]|[1-4]\d|5[0-3])\b", text)
    if match:
        return (int(match.group(1)), int(match.group(2)))

    match = re.search(r"\bw(0?[1-9]|[1-4]\d|5[0-3])\s+(\d{4})\b", text)
    if match:
        return (int(match.group(2)), int(match.group(1)))

    return (None, None)


def is_relative_period(text: str) -> bool:
    """
    Detect a relative label ("last month", "this week", "today").

    Examples:
        >>> is_relative_period("next year")
        True

        >>> is_relative_period("2025")
        False
    """
    if text in RELATIVE_DAYS:
        return True
    return re.search(r"\b(last|previous|prior|this|current|next)\b", text) is not None


def extract_relative(text: str) -> tuple[int, str] | None:
    """
    Split a relative label into ``(offset, granularity)``.

    Examples:
        >>> extract_relative("previous week")
        (-1, 'week')

        >>> extract_relative("tomorrow")
        (1, 'day')

        >>> extract_relative("last quarter")
    """
    if text in RELATIVE_DAYS:
        return (RELATIVE_DAYS[text], "day")

    unit = next((u for u in RELATIVE_UNITS if re.search(rf"\b{u}\b", text)), None)
    if unit is None:
        return None

    if re.search(r"\b(last|previous|prior)\b", text):
        return (-1, unit)
    if re.search(r"\b(this|current)\b", text):
        return (0, unit)
    if re.search(r"\bnext\b", text):
        return (1, unit)
    return None


__all__ = [
    "normalize_period_text",
    "extract_year",
    "extract_year_month",
    "extract_date",
    "extract_time",
    "extract_month_name",
    "extract_iso_week",
    "is_relative_period",
    "extract_relative",
]
