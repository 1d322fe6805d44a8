# objmesh/utils/numeric.py
"""
Разбор чисел с плавающей точкой, где разделитель – всегда '.'.

`float()` в Python не зависит от локали, но принимает лишнее
(`1_000`, `,` не принимает, зато принимает пробелы по краям). Здесь
разрешён только формат, который понимает `%f` в C‑локали.
"""

import re
from typing import Optional, Sequence

_FLOAT_RE = re.compile(
    r"""^[-+]?(
            (\d+\.?\d*([eE][-+]?\d+)?)
          | (\.\d+([eE][-+]?\d+)?)
          | inf(inity)?
          | nan
        )$""",
    re.VERBOSE | re.IGNORECASE,
)


def parse_float(token: str) -> Optional[float]:
    """Число из токена или None, если токен не является float‑ом."""
    if not _FLOAT_RE.match(token):
        return None
    return float(token)


def parse_floats(tokens: Sequence[str], count: int) -> Optional[list[float]]:
    """
    Первые `count` токенов как float‑ы.

    Лишние токены игнорируются (как у sscanf), нехватка или
    нечисловой токен → None.
    """
    if len(tokens) < count:
        return None
    values = []
    for tok in tokens[:count]:
        value = parse_float(tok)
        if value is None:
            return None
        values.append(value)
    return values
