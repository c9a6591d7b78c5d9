# farmstand/api/v1/routers/assets.py
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from typing import Annotated
import logging

from farmstand.api.deps import READ_METHODS, settings_dep, templates_dep
from farmstand.core.config import Settings
from farmstand.domain.services.static_svc import read_asset
from farmstand.domain.services.template_svc import TemplateSet

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assets"])

SettingsDep = Annotated[Settings, Depends(settings_dep)]
TemplatesDep = Annotated[TemplateSet, Depends(templates_dep)]

FILE_NOT_FOUND = "404 - File not found"
IMAGE_NOT_FOUND = "404 - Image not found"

# Path parameters arrive percent-decoded; they are not decoded a second time.


@router.api_route("/public/{file_path:path}", methods=READ_METHODS)
async def public_file(file_path: str, settings: SettingsDep):
    asset = await read_asset(settings.public_root, file_path)
    if asset is None:
        return PlainTextResponse(FILE_NOT_FOUND, status_code=404)
    data, content_type = asset
    return Response(content=data, media_type=content_type)


@router.api_route("/images/{file_path:path}", methods=READ_METHODS)
@router.api_route("/img/{file_path:path}", methods=READ_METHODS)
async def image_file(file_path: str, settings: SettingsDep):
    asset = await read_asset(settings.images_root, file_path)
    if asset is None:
        return PlainTextResponse(IMAGE_NOT_FOUND, status_code=404)
    data, content_type = asset
    return Response(content=data, media_type=content_type)


@router.api_route("/html/{file_path:path}", methods=READ_METHODS, response_class=HTMLResponse)
async def html_file(file_path: str, settings: SettingsDep, templates: TemplatesDep):
    asset = await read_asset(settings.html_root, file_path)
    if asset is None:
        return HTMLResponse(templates.not_found, status_code=404)
    data, _ = asset
    return HTMLResponse(data)
