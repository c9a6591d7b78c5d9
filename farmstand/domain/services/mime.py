from pathlib import PurePosixPath

DEFAULT_MIME = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".txt": "text/plain",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}


def resolve(filename: str) -> str:
    """Content type for a file name, by extension (case-insensitive)."""
    ext = PurePosixPath(filename).suffix.lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME)
