# birthdays/render.py
from __future__ import annotations

import sys
from datetime import date
from typing import Dict, Iterable, Optional, TextIO

from colorama import Fore, Style

from .errors import MissingDateError
from .models import Record, Urgency
from .window import days_until

# Stile per livello di urgenza (applicato solo a giorno e mese)
STYLES: Dict[Urgency, str] = {
    Urgency.URGENT: Style.BRIGHT + Fore.RED,
    Urgency.UPCOMING: Style.BRIGHT + Fore.YELLOW,
}


def urgency_of(record: Record, today: date, urgent_days: int = 2) -> Urgency:
    if record.birthdate is None:
        raise MissingDateError(record.name, record.surname)
    return Urgency.for_days(days_until(record.birthdate, today), urgent_days)


def paint(text: str, urgency: Urgency, color: bool = True) -> str:
    if not color:
        return text
    return f"{STYLES[urgency]}{text}{Style.RESET_ALL}"


def format_record(record: Record, today: date, *, urgent_days: int = 2, color: bool = True) -> str:
    """
    "<name> <surname> <giorno>.<mese>", giorno e mese senza zeri iniziali.
    Solleva MissingDateError se il record non ha data.
    """
    urgency = urgency_of(record, today, urgent_days)
    d = record.birthdate
    return (
        f"{record.name} {record.surname} "
        f"{paint(str(d.day), urgency, color)}.{paint(str(d.month), urgency, color)}"
    )


def print_records(
    records: Iterable[Record],
    today: date,
    *,
    urgent_days: int = 2,
    color: bool = True,
    stream: Optional[TextIO] = None,
) -> int:
    """Stampa una riga per record, nell'ordine dato. Ritorna il numero di righe stampate."""
    out = stream if stream is not None else sys.stdout
    n = 0
    for r in records:
        print(format_record(r, today, urgent_days=urgent_days, color=color), file=out)
        n += 1
    return n
