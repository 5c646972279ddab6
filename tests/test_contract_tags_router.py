from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pool_tags.api.deps import get_graph_api_key, get_return_tags_use_case
from pool_tags.application.dto.return_tags import ReturnTagsOutput
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.exceptions import TagsFetchError, UnsupportedChainError
from pool_tags.main import app


class FakeReturnTagsUseCase:
    def __init__(self, *, error: Exception | None = None):
        self._error = error
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        if self._error is not None:
            raise self._error
        return ReturnTagsOutput(
            tags=[
                ContractTag(
                    address="eip155:42161:0xpool",
                    label="WETH/USDC CL Pool (0.05%, tick: 10)",
                    project="Ramses V3",
                    link="https://app.ramses.exchange/",
                    note="note",
                )
            ],
            pages=1,
            skipped=0,
            rejected=[],
        )


@pytest.fixture(autouse=True)
def _clear_dependency_overrides():
    yield
    app.dependency_overrides.clear()


def test_router_returns_tags_with_output_keys():
    use_case = FakeReturnTagsUseCase()
    app.dependency_overrides[get_graph_api_key] = lambda: "api-key"
    app.dependency_overrides[get_return_tags_use_case] = lambda: use_case

    client = TestClient(app)
    response = client.get("/v1/contract-tags", params={"chain_id": "42161"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "Contract Address": "eip155:42161:0xpool",
            "Public Name Tag": "WETH/USDC CL Pool (0.05%, tick: 10)",
            "Project Name": "Ramses V3",
            "UI/Website Link": "https://app.ramses.exchange/",
            "Public Note": "note",
        }
    ]
    assert use_case.commands[0].api_key == "api-key"


def test_router_maps_unsupported_chain_to_400():
    app.dependency_overrides[get_graph_api_key] = lambda: "api-key"
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase(
        error=UnsupportedChainError("Unsupported chain id: 1")
    )

    client = TestClient(app)
    response = client.get("/v1/contract-tags", params={"chain_id": "1"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Unsupported chain id: 1"


def test_router_maps_fetch_failure_to_502():
    app.dependency_overrides[get_graph_api_key] = lambda: "api-key"
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase(
        error=TagsFetchError("Failed to fetch pools: status 503")
    )

    client = TestClient(app)
    response = client.get("/v1/contract-tags")

    assert response.status_code == 502
