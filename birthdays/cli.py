# birthdays/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from typing import List, Optional

from colorama import just_fix_windows_console

from . import __version__
from .config import Settings
from .errors import BirthdayError
from .io_csv import read_records
from .models import Record
from .render import print_records
from .window import filter_upcoming, sort_by_birthdate

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"data non valida '{value}' (atteso YYYY-MM-DD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="birthdays",
        description="Stampa i compleanni imminenti letti da un file CSV.",
    )
    parser.add_argument(
        "-b",
        "--birthday-file",
        required=True,
        help="CSV con colonne name;surname;birthdate (data come 31-01-2000, separatore ';')",
    )
    parser.add_argument(
        "-d",
        "--days",
        type=int,
        default=Settings.days,
        help=f"Numero di giorni da considerare (default {Settings.days})",
    )
    parser.add_argument(
        "--urgent-days",
        type=int,
        default=Settings.urgent_days,
        help=f"Compleanni entro questi giorni sono evidenziati in rosso (default {Settings.urgent_days})",
    )
    parser.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Simula la data odierna (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--rollover",
        action="store_true",
        help="Confronta con la prossima ricorrenza: a fine anno include anche i compleanni di inizio anno prossimo",
    )
    parser.add_argument("--no-color", action="store_true", help="Output senza codici ANSI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log di debug su stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def upcoming_birthdays(path: str, settings: Settings) -> List[Record]:
    """Lettura, filtro sulla finestra e ordinamento. Nessuna stampa."""
    today = settings.reference_date()
    records = read_records(
        path,
        reference=today,
        delimiter=settings.delimiter,
        date_format=settings.date_format,
    )
    kept = filter_upcoming(records, today, settings.days, rollover=settings.rollover)
    return sort_by_birthdate(kept)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # "oggi" fissato una volta sola per lettura, filtro e stampa
    settings = Settings.from_args(args)
    settings = replace(settings, today=settings.reference_date())
    if settings.color:
        just_fix_windows_console()

    try:
        records = upcoming_birthdays(args.birthday_file, settings)
        printed = print_records(
            records,
            settings.reference_date(),
            urgent_days=settings.urgent_days,
            color=settings.color,
        )
        log.debug("stampati %d compleanni", printed)
    except BirthdayError as e:
        log.error("%s", e)
        return EXIT_FAILURE
    return EXIT_OK


def run() -> None:
    raise SystemExit(main())
