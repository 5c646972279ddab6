from __future__ import annotations

from dataclasses import dataclass

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.services.pool_tag_transformer import RejectedPool


@dataclass(frozen=True)
class ReturnTagsInput:
    chain_id: str | int
    api_key: str


@dataclass(frozen=True)
class ReturnTagsOutput:
    tags: list[ContractTag]
    pages: int
    skipped: int
    rejected: list[RejectedPool]
