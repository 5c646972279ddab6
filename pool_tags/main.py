from __future__ import annotations

from fastapi import FastAPI

from pool_tags.api.routers.contract_tags import router as contract_tags_router

app = FastAPI(title="Pool Tags API")
app.include_router(contract_tags_router)
