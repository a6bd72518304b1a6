from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from process_miner.lib.constants import UNKNOWN_DURATION, ZERO_DURATION

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# Do maior para o menor; o primeiro limiar atingido define a unidade.
_UNITS: tuple[tuple[int, str], ...] = (
    (MS_PER_DAY, "days"),
    (MS_PER_HOUR, "hours"),
    (MS_PER_MINUTE, "minutes"),
    (MS_PER_SECOND, "seconds"),
)


def _fixed(value: float, digits: int) -> str:
    """Arredonda meio-para-cima sobre o valor binário exato."""
    quantum = Decimal(1).scaleb(-digits)
    try:
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # valores além da precisão do contexto decimal
        return f"{value:.{digits}f}"


def format_duration(ms: Any = None) -> str:
    """Formata uma duração em milissegundos na maior unidade adequada.

    ``None``, NaN, valores negativos, infinitos ou não numéricos retornam
    ``"N/A"``; zero retorna ``"0 ms"``. Dias/horas/minutos/segundos usam uma
    casa decimal, milissegundos são exibidos sem decimais.

    >>> format_duration(1500)
    '1.5 seconds'
    >>> format_duration(90000)
    '1.5 minutes'
    """
    if ms is None or isinstance(ms, bool):
        return UNKNOWN_DURATION
    try:
        value = float(ms)
    except (TypeError, ValueError):
        return UNKNOWN_DURATION
    if math.isnan(value) or math.isinf(value) or value < 0:
        return UNKNOWN_DURATION
    if value == 0:
        return ZERO_DURATION

    for unit_ms, label in _UNITS:
        if value >= unit_ms:
            return f"{_fixed(value / unit_ms, 1)} {label}"
    return f"{_fixed(value, 0)} ms"
