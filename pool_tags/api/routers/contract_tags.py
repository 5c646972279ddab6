from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pool_tags.api.deps import get_graph_api_key, get_return_tags_use_case
from pool_tags.api.schemas.contract_tag import ContractTagResponse
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.exceptions import (
    MissingCredentialError,
    SubgraphConfigurationError,
    TagsFetchError,
    UnsupportedChainError,
)

router = APIRouter()


@router.get(
    "/v1/contract-tags",
    response_model=list[ContractTagResponse],
    response_model_by_alias=True,
)
def list_contract_tags(
    chain_id: str = "42161",
    api_key: str = Depends(get_graph_api_key),
    use_case: ReturnTagsUseCase = Depends(get_return_tags_use_case),
):
    try:
        result = use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key))
    except UnsupportedChainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MissingCredentialError as exc:
        raise HTTPException(status_code=500, detail="GRAPH_API_KEY is required.") from exc
    except SubgraphConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except TagsFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [
        ContractTagResponse(
            contract_address=tag.address,
            public_name_tag=tag.label,
            project_name=tag.project,
            ui_website_link=tag.link,
            public_note=tag.note,
        )
        for tag in result.tags
    ]
