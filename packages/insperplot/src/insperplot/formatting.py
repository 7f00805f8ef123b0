"""Brazilian number formatting and caption helpers.

Numbers use "." as the thousands separator and "," as the decimal mark.
Scalars return a ``str``; sequences return a ``list[str]``, so the
functions can be passed as ``label_formatter`` or applied to whole columns.
"""

from __future__ import annotations

import datetime as dt
import warnings
from collections.abc import Iterable

import numpy as np

MONTHS_PT = (
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
)
MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MISSING = "NA"


def _is_scalar(x) -> bool:
    return isinstance(x, (int, float, np.number)) or np.ndim(x) == 0


def _br(value: float, digits: int) -> str:
    if value is None or np.isnan(value):
        return MISSING
    text = f"{abs(float(value)):,.{digits}f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    # "-0,0" is not a useful label
    if value < 0 and any(ch not in "0,." for ch in text):
        text = "-" + text
    return text


def _auto_digits(values: Iterable[float]) -> int:
    finite = [float(v) for v in values if v is not None and not np.isnan(v)]
    return 0 if all(v.is_integer() for v in finite) else 2


def format_num_br(x, digits: int | None = None):
    """1234.56 -> "1.234,56"; ``digits=None`` drops decimals for integral input."""
    if _is_scalar(x):
        d = _auto_digits([x]) if digits is None else digits
        return _br(x, d)
    values = list(x)
    d = _auto_digits(values) if digits is None else digits
    return [_br(v, d) for v in values]


def format_brl(x, symbol: bool = True, digits: int | None = None):
    """Brazilian real: 1234.5 -> "R$ 1.234,50"."""
    prefix = "R$ " if symbol else ""
    formatted = format_num_br(x, digits)
    if isinstance(formatted, str):
        return formatted if formatted == MISSING else prefix + formatted
    return [f if f == MISSING else prefix + f for f in formatted]


def format_percent_br(x, digits: int = 1):
    """Proportion to percent: 0.1234 -> "12,3%"."""
    if x is None:
        return MISSING
    if _is_scalar(x):
        out = _br(float(x) * 100, digits)
        return out if out == MISSING else out + "%"
    return [format_percent_br(v, digits) for v in x]


def insper_caption(
    text: str | None = None,
    source: str | None = None,
    date: dt.date | None = None,
    lang: str = "pt",
) -> str:
    """Chart caption, parts joined with " | ".

    Usage:
        insper_caption(source="IBGE", date=datetime.date(2024, 3, 1))
        # "Fonte: IBGE | Insper | Março 2024"
    """
    parts: list[str] = []
    if text:
        parts.append(text)
    if source:
        parts.append(f"{'Fonte:' if lang == 'pt' else 'Source:'} {source}")
    if date is not None:
        if not isinstance(date, dt.date):
            warnings.warn(
                f"Invalid date {date!r}; using today's date instead.",
                UserWarning,
                stacklevel=2,
            )
            date = dt.date.today()
        months = MONTHS_PT if lang == "pt" else MONTHS_EN
        parts.append(f"Insper | {months[date.month - 1]} {date.year}")
    return " | ".join(parts)
