from __future__ import annotations

import logging

from pool_tags.application.dto.return_tags import ReturnTagsInput, ReturnTagsOutput
from pool_tags.application.ports.pool_source_port import PoolSourcePort
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.exceptions import (
    MissingCredentialError,
    PoolSourceError,
    TagsFetchError,
    UnsupportedChainError,
)
from pool_tags.domain.services.pool_tag_transformer import (
    PROJECT_LINK,
    PROJECT_NAME,
    RejectedPool,
    transform_page,
)


logger = logging.getLogger(__name__)


SUPPORTED_CHAIN_ID = "42161"
PAGE_SIZE = 1000


class ReturnTagsUseCase:
    """Percorre a fonte de pools e monta uma tag por endereco de pool.

    As paginas sao pedidas com ``createdAtTimestamp > cursor`` em ordem
    ascendente; uma pagina cheia avanca o cursor para o timestamp do ultimo
    registro. Pools com exatamente esse timestamp alem do limite da pagina
    nao sao pedidas de novo.
    """

    def __init__(
        self,
        *,
        pool_source: PoolSourcePort,
        page_size: int = PAGE_SIZE,
        project_name: str = PROJECT_NAME,
        project_link: str = PROJECT_LINK,
    ):
        self._pool_source = pool_source
        self._page_size = page_size
        self._project_name = project_name
        self._project_link = project_link

    def execute(self, command: ReturnTagsInput) -> ReturnTagsOutput:
        chain_id = str(command.chain_id).strip()
        if chain_id != SUPPORTED_CHAIN_ID:
            raise UnsupportedChainError(f"Unsupported chain id: {command.chain_id}")
        api_key = (command.api_key or "").strip()
        if not api_key:
            raise MissingCredentialError("Missing subgraph API key.")

        last_timestamp = 0
        pages = 0
        skipped = 0
        tags: list[ContractTag] = []
        rejected: list[RejectedPool] = []
        seen_addresses: set[str] = set()

        while True:
            try:
                records = self._pool_source.fetch_pools_page(
                    api_key=api_key,
                    last_timestamp=last_timestamp,
                    page_size=self._page_size,
                )
            except PoolSourceError as exc:
                logger.warning(
                    "return_tags: fetch_failed page=%s last_timestamp=%s error=%s",
                    pages + 1,
                    last_timestamp,
                    exc,
                )
                raise TagsFetchError(f"Failed to fetch pools: {exc}") from exc
            pages += 1

            page = transform_page(
                records,
                chain_id=chain_id,
                project_name=self._project_name,
                project_link=self._project_link,
            )
            for tag in page.tags:
                if tag.address in seen_addresses:
                    continue
                seen_addresses.add(tag.address)
                tags.append(tag)

            skipped += page.skipped
            if page.rejected:
                rejected.extend(page.rejected)
                logger.warning(
                    "return_tags: rejected_pools page=%s count=%s entries=%s",
                    pages,
                    len(page.rejected),
                    "; ".join(f"{row.pool_id} [{row.reason}] {row.detail}" for row in page.rejected),
                )

            if len(records) != self._page_size:
                break
            last_timestamp = records[-1].created_at_timestamp

        logger.info(
            "return_tags: returned_tags pages=%s tags=%s skipped=%s rejected=%s",
            pages,
            len(tags),
            skipped,
            len(rejected),
        )
        return ReturnTagsOutput(tags=tags, pages=pages, skipped=skipped, rejected=rejected)
