# birthdays/parsing.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%d-%m-%Y"


def normalize_year(d: date, year: int) -> date:
    """
    Riporta `d` all'anno `year` mantenendo giorno e mese.
    Il 29 febbraio in un anno non bisestile diventa 28 febbraio.
    """
    if d.month == 2 and d.day == 29:
        try:
            return d.replace(year=year)
        except ValueError:
            return date(year, 2, 28)
    return d.replace(year=year)


def parse_date_of_birth(raw: Optional[str], fmt: str = DATE_FORMAT) -> Optional[date]:
    """Data "DD-MM-YYYY" così com'è. Campo vuoto -> None, formato non valido -> ValueError."""
    s = (raw or "").strip()
    if not s:
        return None
    return datetime.strptime(s, fmt).date()


def parse_birthdate(raw: Optional[str], year: int, fmt: str = DATE_FORMAT) -> Optional[date]:
    """
    Interpreta una data di nascita "DD-MM-YYYY" e la normalizza all'anno `year`.
    Campo vuoto -> None. Formato non valido -> ValueError (messaggio di strptime).
    """
    born = parse_date_of_birth(raw, fmt)
    return normalize_year(born, year) if born is not None else None
