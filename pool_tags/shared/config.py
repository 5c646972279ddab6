from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    graph_subgraph_id: str
    graph_request_timeout_seconds: float
    tags_project_name: str
    tags_project_link: str


def get_settings() -> Settings:
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_subgraph_id=_env("GRAPH_SUBGRAPH_ID", ""),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "30")),
        tags_project_name=_env("TAGS_PROJECT_NAME", "Ramses V3"),
        tags_project_link=_env("TAGS_PROJECT_LINK", "https://app.ramses.exchange/"),
    )
