from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from .errors import FileOpenError, RowParseError
from .models import Record
from .parsing import DATE_FORMAT, normalize_year, parse_date_of_birth

log = logging.getLogger(__name__)

# Colonne attese nell'header (case-insensitive)
EXPECTED = ("name", "surname", "birthdate")


def _map_columns(header: pd.Series) -> Dict[str, int]:
    """Ritorna la posizione di ciascuna colonna attesa. Gestisce BOM e spazi; le colonne extra sono ignorate."""
    def normalize(col: object) -> str:
        x = ("" if pd.isna(col) else str(col)).strip().lstrip("\ufeff").lower()
        return x.replace("\xa0", " ").strip()

    positions: Dict[str, int] = {}
    for pos, raw_col in enumerate(header.tolist()):
        norm = normalize(raw_col)
        if norm in EXPECTED and norm not in positions:
            positions[norm] = pos

    missing = [c for c in EXPECTED if c not in positions]
    if missing:
        raise RowParseError(
            "l'header deve contenere le colonne 'name;surname;birthdate' "
            f"(mancanti: {', '.join(missing)})"
        )
    return positions


def read_records(
    path: str,
    *,
    reference: Optional[date] = None,
    delimiter: str = ";",
    date_format: str = DATE_FORMAT,
) -> List[Record]:
    """
    Legge il CSV dei compleanni e ritorna un Record per riga, nell'ordine del file.
    Le date sono normalizzate all'anno di `reference` (default: oggi).
    Le righe vuote sono ignorate ma contano nella numerazione degli errori.
    Il primo errore interrompe la lettura: nessun risultato parziale.
    """
    year = (reference or date.today()).year
    try:
        # header=None: il numero di colonne lo decide la prima riga, cosi le righe
        # più lunghe sollevano ParserError e quelle più corte restano con NaN.
        # Le righe vuote restano nel DataFrame: indice + 1 = riga nel file
        df = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError:
        log.debug("file %s vuoto", path)
        return []
    except pd.errors.ParserError as e:
        raise RowParseError(str(e).strip()) from e
    except UnicodeDecodeError as e:
        raise RowParseError(f"codifica non valida ({e})") from e
    except OSError as e:
        raise FileOpenError(str(path), e.strerror or e) from e

    blank = df.apply(lambda r: all(pd.isna(v) or v == "" for v in r), axis=1)
    rows = df[~blank]
    if rows.empty:
        log.debug("file %s senza righe", path)
        return []

    cols = _map_columns(rows.iloc[0])
    records: List[Record] = []
    for idx, row in rows.iloc[1:].iterrows():
        line = int(idx) + 1
        values = {key: row.iloc[pos] for key, pos in cols.items()}
        if any(pd.isna(v) for v in values.values()):
            raise RowParseError(
                f"attese almeno {max(cols.values()) + 1} colonne, trovate {int(row.notna().sum())}",
                line=line,
            )
        try:
            born = parse_date_of_birth(values["birthdate"], date_format)
        except ValueError as e:
            raise RowParseError(f"data non valida '{values['birthdate']}': {e}", line=line) from e
        # nomi ripuliti dagli spazi attorno al separatore ("Ann ; Lee")
        records.append(Record(
            name=str(values["name"]).strip(),
            surname=str(values["surname"]).strip(),
            birthdate=normalize_year(born, year) if born is not None else None,
            born=born,
        ))

    log.debug("lette %d righe da %s", len(records), path)
    return records
