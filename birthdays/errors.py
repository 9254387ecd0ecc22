# birthdays/errors.py
from __future__ import annotations

from typing import Optional


class BirthdayError(Exception):
    """Errore base: qualunque sottoclasse interrompe l'esecuzione della CLI."""


class FileOpenError(BirthdayError, OSError):
    def __init__(self, path: str, reason: object) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"impossibile aprire '{path}': {reason}")


class RowParseError(BirthdayError, ValueError):
    """
    Riga non valida: numero di colonne errato, colonna mancante nell'header
    oppure data non interpretabile. `line` è il numero di riga nel file
    (1 = prima riga, righe vuote comprese), None se non determinabile.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        self.detail = message
        prefix = f"riga {line}: " if line is not None else ""
        super().__init__(prefix + message)


class MissingDateError(BirthdayError, ValueError):
    def __init__(self, name: str, surname: str) -> None:
        self.name = name
        self.surname = surname
        super().__init__(f"data di nascita mancante per {name} {surname}".rstrip())
