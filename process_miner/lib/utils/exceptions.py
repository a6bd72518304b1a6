"""Exceptions for event log ingestion."""


class LogFormatError(ValueError):
    """Arquivo de log não pôde ser interpretado (formato, colunas ou campos)."""
