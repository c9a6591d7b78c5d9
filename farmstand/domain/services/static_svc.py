from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

from fastapi.concurrency import run_in_threadpool

from farmstand.domain.services import mime

logger = logging.getLogger(__name__)


def resolve_within(root: Path, relative: str) -> Optional[Path]:
    """
    Join an (already percent-decoded) request path onto root.
    Returns None when the result would leave root, e.g. via '..' or an absolute path.
    """
    base = root.resolve()
    try:
        target = (base / relative.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if not target.is_relative_to(base):
        logger.warning("Blocked path escaping %s: %r", base, relative)
        return None
    return target


async def read_asset(root: Path, relative: str) -> Optional[tuple[bytes, str]]:
    """
    Read a file below root and resolve its content type.
    Any failure (escape, missing file, directory, permissions) is reported as None.
    """
    target = resolve_within(root, relative)
    if target is None:
        return None
    try:
        data = await run_in_threadpool(target.read_bytes)
    except (OSError, ValueError) as e:
        logger.debug("Asset not readable %s: %s", target, e)
        return None
    return data, mime.resolve(target.name)
