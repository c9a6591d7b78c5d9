# farmstand/domain/repositories/catalog_repo.py

from __future__ import annotations
from pathlib import Path
from typing import Iterator, Optional
import json
import logging

from pydantic import ValidationError

from farmstand.core.errors import CatalogError
from farmstand.domain.models.product import Product

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Read-only, ordered product catalog.
    The position of a product in the sequence is its public id:
      products[i].id == i
    """

    def __init__(self, products: tuple[Product, ...]):
        self._products = products

    @classmethod
    def load(cls, path: Path) -> "CatalogStore":
        """
        Load the catalog from a JSON document, either {"products": [...]} or a bare array.
        Raises CatalogError for anything but a well-formed document.
        """
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogError(f"cannot read catalog {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"catalog {path} is not valid JSON: {e}") from e

        records = raw.get("products") if isinstance(raw, dict) else raw
        if not isinstance(records, list):
            raise CatalogError(f"catalog {path} must hold a list of products")

        products = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise CatalogError(f"catalog entry #{index} is not an object")
            if record.get("id", index) != index:
                raise CatalogError(
                    f"catalog entry #{index} has id={record.get('id')!r}; ids must match positions"
                )
            try:
                products.append(Product.model_validate({**record, "id": index}))
            except ValidationError as e:
                raise CatalogError(f"catalog entry #{index} is invalid: {e}") from e

        logger.debug("Catalog parsed from %s (%s products)", path, len(products))
        return cls(tuple(products))

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def all(self) -> tuple[Product, ...]:
        return self._products

    def get(self, index: int) -> Optional[Product]:
        # negative indexes must not wrap around
        if 0 <= index < len(self._products):
            return self._products[index]
        return None

    def as_json(self) -> list[dict]:
        return [p.model_dump() for p in self._products]
