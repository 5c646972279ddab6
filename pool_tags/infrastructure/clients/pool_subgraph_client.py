from __future__ import annotations

from dataclasses import dataclass
import logging
from urllib.parse import quote

import httpx

from pool_tags.domain.entities.contract_tag import RawPoolRecord, RawTokenRecord
from pool_tags.domain.exceptions import (
    MalformedResponseError,
    SourceError,
    SubgraphConfigurationError,
    TransportError,
)


logger = logging.getLogger(__name__)


POOLS_QUERY = """
query PoolsCreatedAfter($lastTimestamp: BigInt!, $first: Int!) {
  pools(
    first: $first,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $lastTimestamp }
  ) {
    id
    feeTier
    liquidity
    sqrtPrice
    tickSpacing
    createdAtTimestamp
    token0 { id name symbol decimals }
    token1 { id name symbol decimals }
  }
}
"""

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class PoolSubgraphClientSettings:
    graph_gateway_base: str
    graph_subgraph_id: str
    timeout_seconds: float


class PoolSubgraphClient:
    def __init__(
        self,
        settings: PoolSubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def fetch_pools_page(
        self,
        *,
        api_key: str,
        last_timestamp: int,
        page_size: int,
    ) -> list[RawPoolRecord]:
        payload = self._post_graphql(
            url=self._build_gateway_url(api_key),
            query=POOLS_QUERY,
            variables={"lastTimestamp": str(int(last_timestamp)), "first": int(page_size)},
        )

        data = payload.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError("Subgraph response has no data payload.")
        rows = data.get("pools")
        if not isinstance(rows, list):
            raise MalformedResponseError("Subgraph response has no pools list.")

        pools = [_map_pool_row(row) for row in rows]
        logger.info(
            "pool_subgraph_client: fetched_pools_page last_timestamp=%s fetched=%s",
            last_timestamp,
            len(pools),
        )
        return pools

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                    headers=REQUEST_HEADERS,
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Subgraph request failed with status {exc.response.status_code}."
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Subgraph request failed: {exc}") from exc
        except ValueError as exc:
            raise MalformedResponseError("Subgraph response is not valid JSON.") from exc

        if not isinstance(payload, dict):
            raise MalformedResponseError("Subgraph response is not a JSON object.")

        errors = payload.get("errors") or []
        if errors:
            messages = [
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            for message in messages:
                logger.error("pool_subgraph_client: graphql_error message=%s", message)
            raise SourceError(" | ".join(messages))

        return payload

    def _build_gateway_url(self, api_key: str) -> str:
        subgraph_id = self._settings.graph_subgraph_id.strip()
        if not subgraph_id:
            raise SubgraphConfigurationError("GRAPH_SUBGRAPH_ID is required for subgraph access.")
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        key_segment = quote(api_key.strip(), safe="")
        return f"{base}/{key_segment}/subgraphs/id/{subgraph_id}"


def _map_token_row(row: dict | None) -> RawTokenRecord | None:
    if not isinstance(row, dict):
        return None
    return RawTokenRecord(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or ""),
        symbol=str(row.get("symbol") or ""),
        decimals=_str_or_none(row.get("decimals")),
    )


def _map_pool_row(row: dict) -> RawPoolRecord:
    if not isinstance(row, dict):
        raise MalformedResponseError("Pool row is not an object.")
    pool_id = row.get("id")
    created_at = row.get("createdAtTimestamp")
    if not pool_id or created_at is None:
        raise MalformedResponseError("Pool row is missing id or createdAtTimestamp.")
    try:
        created_at_timestamp = int(created_at)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(
            f"Pool {pool_id} has invalid createdAtTimestamp: {created_at!r}"
        ) from exc

    return RawPoolRecord(
        id=str(pool_id),
        fee_tier=str(row.get("feeTier") or ""),
        token0=_map_token_row(row.get("token0")),
        token1=_map_token_row(row.get("token1")),
        created_at_timestamp=created_at_timestamp,
        tick_spacing=_str_or_none(row.get("tickSpacing")),
        liquidity=_str_or_none(row.get("liquidity")),
        sqrt_price=_str_or_none(row.get("sqrtPrice")),
    )


def _str_or_none(value) -> str | None:
    return str(value) if value is not None else None
