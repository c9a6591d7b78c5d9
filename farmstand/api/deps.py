# farmstand/api/deps.py
from fastapi import Request
from farmstand.core.config import Settings
from farmstand.domain.repositories.catalog_repo import CatalogStore
from farmstand.domain.services.template_svc import TemplateSet

# State below is created once by the lifespan and only ever read afterwards

def catalog_dep(request: Request) -> CatalogStore:
    return request.app.state.catalog

def templates_dep(request: Request) -> TemplateSet:
    return request.app.state.templates

def settings_dep(request: Request) -> Settings:
    return request.app.state.settings

# Every page and asset route answers GET and HEAD; other methods get the 404 page
READ_METHODS = ["GET", "HEAD"]
