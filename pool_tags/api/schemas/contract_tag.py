from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContractTagResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contract_address: str = Field(
        ...,
        alias="Contract Address",
        description="CAIP-10 style address: eip155:<chain_id>:<pool_address>.",
    )
    public_name_tag: str = Field(..., alias="Public Name Tag", max_length=50)
    project_name: str = Field(..., alias="Project Name")
    ui_website_link: str = Field(..., alias="UI/Website Link")
    public_note: str = Field(..., alias="Public Note")
