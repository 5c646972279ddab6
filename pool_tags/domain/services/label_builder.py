from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from math import ceil


MAX_LABEL_LENGTH = 50
ELLIPSIS = "..."
TICK_SPACING_FALLBACK = "N/A"


def format_fee_tier(fee_tier_raw: str | int) -> str:
    try:
        fee = Decimal(str(fee_tier_raw).strip())
        if not fee.is_finite():
            raise InvalidOperation(fee_tier_raw)
        pct = (fee / Decimal("10000")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"fee_tier must be numeric, got {fee_tier_raw!r}.") from exc
    return f"{pct}%"


def truncate_symbol_pair(symbol0: str, symbol1: str, max_symbols_len: int) -> tuple[str, str]:
    if len(f"{symbol0}/{symbol1}") <= max_symbols_len:
        return symbol0, symbol1

    available = max(0, max_symbols_len - 2 * len(ELLIPSIS))
    half0 = ceil(available / 2)
    half1 = available // 2
    return _truncate(symbol0, half0), _truncate(symbol1, half1)


def _truncate(symbol: str, limit: int) -> str:
    if len(symbol) <= limit:
        return symbol
    return symbol[:limit] + ELLIPSIS


def build_label(
    symbol0: str,
    symbol1: str,
    fee_tier_raw: str | int,
    tick_spacing: str | int | None = None,
) -> str:
    """Monta ``"<s0>/<s1> CL Pool (<fee>, tick: <spacing>)"`` em ate 50 caracteres.

    Fee tier e tick spacing nunca sao encurtados; os symbols absorvem todo o
    truncamento.
    """
    tick = str(tick_spacing) if tick_spacing not in (None, "") else TICK_SPACING_FALLBACK
    suffix = f" CL Pool ({format_fee_tier(fee_tier_raw)}, tick: {tick})"
    max_symbols_len = MAX_LABEL_LENGTH - len(suffix) - 1

    short0, short1 = truncate_symbol_pair(symbol0, symbol1, max_symbols_len)
    label = f"{short0}/{short1}{suffix}"
    if len(label) > MAX_LABEL_LENGTH:
        label = label[:MAX_LABEL_LENGTH]
    return label
