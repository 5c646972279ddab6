from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.contract_tag import RawPoolRecord


class PoolSourcePort(Protocol):
    def fetch_pools_page(
        self,
        *,
        api_key: str,
        last_timestamp: int,
        page_size: int,
    ) -> list[RawPoolRecord]:
        ...
