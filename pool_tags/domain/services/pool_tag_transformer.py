from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from pool_tags.domain.entities.contract_tag import ContractTag, RawPoolRecord, RawTokenRecord
from pool_tags.domain.services.label_builder import TICK_SPACING_FALLBACK, build_label
from pool_tags.domain.services.sanitizer import contains_markup, decode_symbol


ADDRESS_NAMESPACE = "eip155"
PROJECT_NAME = "Ramses V3"
PROJECT_LINK = "https://app.ramses.exchange/"

RejectReason = Literal["markup", "invalid_fee_tier"]


@dataclass(frozen=True)
class RejectedPool:
    pool_id: str
    reason: RejectReason
    detail: str


@dataclass(frozen=True)
class PoolTransformResult:
    tag: ContractTag | None = None
    rejected: RejectedPool | None = None

    @property
    def skipped(self) -> bool:
        return self.tag is None and self.rejected is None


@dataclass(frozen=True)
class PageTransformResult:
    tags: list[ContractTag] = field(default_factory=list)
    rejected: list[RejectedPool] = field(default_factory=list)
    skipped: int = 0


def build_address(chain_id: str | int, pool_id: str) -> str:
    return f"{ADDRESS_NAMESPACE}:{chain_id}:{pool_id}"


def _describe_tokens(token0: RawTokenRecord, token1: RawTokenRecord) -> str:
    return (
        f"token0(name={token0.name!r}, symbol={token0.symbol!r}) "
        f"token1(name={token1.name!r}, symbol={token1.symbol!r})"
    )


def transform_pool(
    record: RawPoolRecord,
    *,
    chain_id: str | int,
    project_name: str = PROJECT_NAME,
    project_link: str = PROJECT_LINK,
) -> PoolTransformResult:
    token0 = record.token0
    token1 = record.token1
    if token0 is None or token1 is None:
        return PoolTransformResult()

    symbol0 = decode_symbol(token0.symbol) or token0.symbol
    symbol1 = decode_symbol(token1.symbol) or token1.symbol
    candidates = (token0.name, token0.symbol, symbol0, token1.name, token1.symbol, symbol1)
    if any(contains_markup(value) for value in candidates):
        return PoolTransformResult(
            rejected=RejectedPool(
                pool_id=record.id,
                reason="markup",
                detail=_describe_tokens(token0, token1),
            )
        )

    try:
        label = build_label(symbol0, symbol1, record.fee_tier, record.tick_spacing)
    except ValueError as exc:
        return PoolTransformResult(
            rejected=RejectedPool(pool_id=record.id, reason="invalid_fee_tier", detail=str(exc))
        )

    tick = record.tick_spacing if record.tick_spacing not in (None, "") else TICK_SPACING_FALLBACK
    note = (
        f"The liquidity pool contract on {project_name} for {symbol0} ({token0.name}) / "
        f"{symbol1} ({token1.name}). Fee tier: {record.fee_tier}, tick spacing: {tick}."
    )
    return PoolTransformResult(
        tag=ContractTag(
            address=build_address(chain_id, record.id),
            label=label,
            project=project_name,
            link=project_link,
            note=note,
        )
    )


def transform_page(
    records: Iterable[RawPoolRecord],
    *,
    chain_id: str | int,
    project_name: str = PROJECT_NAME,
    project_link: str = PROJECT_LINK,
) -> PageTransformResult:
    tags: list[ContractTag] = []
    rejected: list[RejectedPool] = []
    skipped = 0
    for record in records:
        result = transform_pool(
            record,
            chain_id=chain_id,
            project_name=project_name,
            project_link=project_link,
        )
        if result.tag is not None:
            tags.append(result.tag)
        elif result.rejected is not None:
            rejected.append(result.rejected)
        else:
            skipped += 1
    return PageTransformResult(tags=tags, rejected=rejected, skipped=skipped)
