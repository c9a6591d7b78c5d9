from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable
import re
import logging

from farmstand.core.config import Settings
from farmstand.core.errors import TemplateError
from farmstand.domain.models.product import Product

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\{%([A-Z_]+)%\}")
CARDS_TOKEN = "{%PRODUCT_CARDS%}"

# token name -> product field accessor
PRODUCT_TOKENS: dict[str, Callable[[Product], object]] = {
    "PRODUCTNAME": lambda p: p.name,
    "IMAGE": lambda p: f"/images/{p.image}",
    "PRICE": lambda p: p.price,
    "ORIGIN": lambda p: p.category,
    "CATEGORY": lambda p: p.category,
    "DESCRIPTION": lambda p: p.description,
    "ID": lambda p: p.id,
    "RATING": lambda p: p.rating,
    "REVIEWS": lambda p: p.reviews,
}


def render(template: str, product: Product) -> str:
    """
    Fill every known {%TOKEN%} with the product's value.
    Single pass: values are never re-scanned, unknown tokens are kept as-is.
    """
    def _sub(match: re.Match) -> str:
        getter = PRODUCT_TOKENS.get(match.group(1))
        if getter is None:
            return match.group(0)
        return str(getter(product))

    return TOKEN_RE.sub(_sub, template)


def render_list(list_template: str, fragments: Iterable[str]) -> str:
    return list_template.replace(CARDS_TOKEN, "".join(fragments))


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"cannot read template {path}: {e}") from e


@dataclass(frozen=True)
class TemplateSet:
    overview: str
    card: str
    product: str
    not_found: str

    @classmethod
    def load(cls, settings: Settings) -> "TemplateSet":
        templates = cls(
            overview=_read_template(settings.site_path(settings.overview_template)),
            card=_read_template(settings.site_path(settings.card_template)),
            product=_read_template(settings.site_path(settings.product_template)),
            not_found=_read_template(settings.site_path(settings.not_found_template)),
        )
        if CARDS_TOKEN not in templates.overview:
            logger.warning("Overview template has no %s token; cards will not be shown", CARDS_TOKEN)
        return templates

    def overview_page(self, products: Iterable[Product]) -> str:
        return render_list(self.overview, (render(self.card, p) for p in products))

    def product_page(self, product: Product) -> str:
        return render(self.product, product)
