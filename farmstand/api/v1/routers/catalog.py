# farmstand/api/v1/routers/catalog.py
from fastapi import APIRouter, Depends
from typing import Annotated
import logging

from farmstand.api.deps import READ_METHODS, catalog_dep
from farmstand.domain.repositories.catalog_repo import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])

CatalogDep = Annotated[CatalogStore, Depends(catalog_dep)]


@router.api_route("/api", methods=READ_METHODS, summary="Full product catalog as a JSON array")
async def list_products(catalog: CatalogDep):
    logger.debug("Response: list_products count=%s", len(catalog))
    return catalog.as_json()
