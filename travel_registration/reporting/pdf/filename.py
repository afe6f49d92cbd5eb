"""Pure helpers deriving the download filename from a record.

No I/O and no layout dependency; every input combination yields a name.
"""
from datetime import date
import re
from typing import Mapping, Optional


_NOT_ALNUM = re.compile(r"[^a-z0-9]")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def canonicalize(value: Optional[str], max_len: int = 20) -> str:
    """Lowercase, drop everything outside [a-z0-9], truncate.

    Accented letters are removed, not transliterated.

    Examples:
        >>> canonicalize("São João")
        'sojoo'
        >>> canonicalize("Hotel Lisboa Centro Histórico")
        'hotellisboacentrohis'
    """
    if not value:
        return ""
    return _NOT_ALNUM.sub("", value.lower())[:max_len]


def is_iso_date(value: Optional[str]) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    if not value or not _ISO_DATE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def derive_filename(record: Mapping[str, str], today: Optional[date] = None) -> str:
    """``{checkin}-{place}-{name}.pdf`` with literal fallbacks.

    Args:
        record: FormRecord (missing keys are fine)
        today: Date used when the check-in date is absent or malformed
    """
    def get(key: str) -> str:
        value = record.get(key)
        return value if isinstance(value, str) else ""

    checkin = get("checkinDate").strip()
    checkin_part = checkin if is_iso_date(checkin) else (today or date.today()).isoformat()
    place_part = canonicalize(get("city") or get("accommodationName") or "place")
    name_part = canonicalize(f"{get('firstName')}{get('lastName')}" or "guest")

    return f"{checkin_part}-{place_part}-{name_part}.pdf"
