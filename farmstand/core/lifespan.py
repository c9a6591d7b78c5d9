# farmstand/core/lifespan.py
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from farmstand.domain.repositories.catalog_repo import CatalogStore
from farmstand.domain.services.template_svc import TemplateSet

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    # --- Startup ---
    # Catalog and templates are mandatory: any failure aborts startup
    try:
        app.state.catalog = CatalogStore.load(settings.site_path(settings.catalog_file))
        app.state.templates = TemplateSet.load(settings)
    except Exception as e:
        logger.critical("❌ Startup failed: %s", e)
        raise
    logger.info("✅ Catalog loaded (%s products) from %s", len(app.state.catalog), settings.SITE_DIR)

    # Application runs
    yield

    # --- Shutdown ---
    logger.info("🔌 %s shutting down", settings.APP_NAME)
