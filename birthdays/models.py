# birthdays/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Record:
    name: str
    surname: str
    birthdate: Optional[date]   # anno sostituito con quello corrente (o il successivo)
    # data di nascita come nel CSV: conserva il 29/2 anche quando birthdate cade in un anno non bisestile
    born: Optional[date] = field(default=None, compare=False, repr=False)


class Urgency(Enum):
    URGENT = "urgent"       # entro `urgent_days` giorni
    UPCOMING = "upcoming"

    @classmethod
    def for_days(cls, days_left: int, urgent_days: int = 2) -> "Urgency":
        return cls.URGENT if days_left <= urgent_days else cls.UPCOMING
