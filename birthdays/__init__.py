"""Promemoria compleanni da CSV: lettura, finestra temporale, stampa colorata."""

__version__ = "0.1.0"
