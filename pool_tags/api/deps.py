from __future__ import annotations

from functools import lru_cache

from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
)
from pool_tags.shared.config import Settings, get_settings


@lru_cache(maxsize=1)
def _get_settings() -> Settings:
    return get_settings()


def get_graph_api_key() -> str:
    return _get_settings().graph_api_key


def build_return_tags_use_case(settings: Settings) -> ReturnTagsUseCase:
    client = PoolSubgraphClient(
        PoolSubgraphClientSettings(
            graph_gateway_base=settings.graph_gateway_base,
            graph_subgraph_id=settings.graph_subgraph_id,
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )
    return ReturnTagsUseCase(
        pool_source=client,
        project_name=settings.tags_project_name,
        project_link=settings.tags_project_link,
    )


def get_return_tags_use_case() -> ReturnTagsUseCase:
    return build_return_tags_use_case(_get_settings())
