# birthdays/window.py
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, List

from .models import Record
from .parsing import normalize_year

log = logging.getLogger(__name__)


def next_occurrence(birthdate: date, today: date) -> date:
    """
    Prossimo compleanno a partire da `today` (incluso): anno corrente o successivo.
    Passare la data di nascita originale, non quella già normalizzata, per non
    perdere il 29 febbraio.
    """
    this_year = normalize_year(birthdate, today.year)
    if this_year >= today:
        return this_year
    return normalize_year(birthdate, today.year + 1)


def days_until(d: date, today: date) -> int:
    return (d - today).days


def filter_upcoming(
    records: Iterable[Record],
    today: date,
    days: int,
    *,
    rollover: bool = False,
) -> List[Record]:
    """
    Tiene i record con compleanno in [today, today + days] (estremi inclusi).

    Di default si confronta la data normalizzata all'anno corrente: un
    compleanno già passato quest'anno resta escluso anche se l'anno prossimo
    cadrebbe nella finestra. Con `rollover` il confronto avviene sulla
    prossima ricorrenza (anno corrente o successivo, ricalcolata dalla data di
    nascita originale) e il record ritornato porta la data della ricorrenza.
    I record senza data vengono scartati.
    """
    kept: List[Record] = []
    for r in records:
        if r.birthdate is None:
            log.debug("scartato %s %s: data di nascita assente", r.name, r.surname)
            continue
        occurrence = next_occurrence(r.born or r.birthdate, today) if rollover else r.birthdate
        delta = days_until(occurrence, today)
        if 0 <= delta <= days:
            kept.append(r if occurrence == r.birthdate else replace(r, birthdate=occurrence))
    log.debug("%d compleanni entro %d giorni da %s", len(kept), days, today.isoformat())
    return kept


def sort_by_birthdate(records: Iterable[Record]) -> List[Record]:
    # ordinamento stabile; eventuali record senza data in fondo
    return sorted(records, key=lambda r: (r.birthdate is None, r.birthdate or date.min))
