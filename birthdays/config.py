# birthdays/config.py
from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .parsing import DATE_FORMAT


@dataclass(frozen=True)
class Settings:
    days: int = 7                   # ampiezza finestra (giorni, estremi inclusi)
    urgent_days: int = 2            # soglia per lo stile "urgente"
    delimiter: str = ";"
    date_format: str = DATE_FORMAT
    rollover: bool = False          # True: confronta con la prossima ricorrenza (anno corrente o successivo)
    color: bool = True
    today: Optional[date] = None    # None -> data locale corrente

    def reference_date(self) -> date:
        return self.today or date.today()

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        return cls(
            days=args.days,
            urgent_days=args.urgent_days,
            rollover=args.rollover,
            color=not args.no_color,
            today=args.today,
        )
