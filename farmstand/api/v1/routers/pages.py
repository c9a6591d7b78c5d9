# farmstand/api/v1/routers/pages.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from typing import Annotated, Optional
import re
import time
import logging

from farmstand.api.deps import READ_METHODS, catalog_dep, templates_dep
from farmstand.domain.repositories.catalog_repo import CatalogStore
from farmstand.domain.services.template_svc import TemplateSet

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

CatalogDep = Annotated[CatalogStore, Depends(catalog_dep)]
TemplatesDep = Annotated[TemplateSet, Depends(templates_dep)]

# ASCII digits only: rejects "-1", "+1", " 1", "1.0" and non-ASCII numerals
_PRODUCT_ID_RE = re.compile(r"[0-9]+")


def parse_product_id(raw: Optional[str], size: int) -> Optional[int]:
    """Return the catalog index for a raw ?id= value, or None if it is not a valid index."""
    if raw is None or not _PRODUCT_ID_RE.fullmatch(raw):
        return None
    index = int(raw)
    return index if index < size else None


@router.api_route("/", methods=READ_METHODS, response_class=HTMLResponse)
@router.api_route("/overview", methods=READ_METHODS, response_class=HTMLResponse)
async def overview(catalog: CatalogDep, templates: TemplatesDep):
    t0 = time.perf_counter()
    html = templates.overview_page(catalog.all())
    logger.debug("Response: overview cards=%s in %.4fs", len(catalog), time.perf_counter() - t0)
    return HTMLResponse(html)


@router.api_route("/product", methods=READ_METHODS, response_class=HTMLResponse)
async def product_detail(
    catalog: CatalogDep,
    templates: TemplatesDep,
    product_id: Optional[str] = Query(None, alias="id", description="Catalog position of the product"),
):
    logger.info("Request: product_detail id=%r", product_id)

    index = parse_product_id(product_id, len(catalog))
    product = catalog.get(index) if index is not None else None
    if product is None:
        logger.info("Response: product_detail id=%r not found", product_id)
        return HTMLResponse(templates.not_found, status_code=404)

    return HTMLResponse(templates.product_page(product))
