# farmstand/core/errors.py

class FarmstandError(Exception):
    """Base class for startup failures; the app refuses to serve when raised."""


class CatalogError(FarmstandError):
    """Catalog document missing, unreadable or malformed."""


class TemplateError(FarmstandError):
    """A required HTML template could not be loaded."""
