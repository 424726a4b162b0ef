import re
import time
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from golden_store.core import config
from golden_store.core.errors import Conflict
from golden_store.models import models
from golden_store.schemas import ProductIn

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    base = _NON_ALNUM.sub("-", text.lower()).strip("-")[: config.SLUG_MAX_LENGTH]
    return base or f"produk-{int(time.time() * 1000)}"


def ensure_unique_slug(db: Session, base_slug: str, ignore_id: Optional[str] = None) -> str:
    """Return ``base_slug`` or the first free ``base_slug-N``.

    A slug held by ``ignore_id`` counts as free so a product keeps its own slug
    on update. Candidates stay within the slug column width; the base is cut
    back to make room for the suffix.
    """
    candidate = base_slug[: config.SLUG_MAX_LENGTH]
    for suffix in range(1, config.SLUG_MAX_ATTEMPTS + 1):
        existing = db.query(models.Product).filter(models.Product.slug == candidate).first()
        if not existing or existing.id == ignore_id:
            return candidate
        tail = f"-{suffix}"
        candidate = base_slug[: config.SLUG_MAX_LENGTH - len(tail)] + tail
    raise Conflict(f"Could not allocate a free slug for '{base_slug}'.")


def list_products(db: Session) -> List[models.Product]:
    return db.query(models.Product).order_by(models.Product.created_at.desc()).all()


def get_product(db: Session, product_id: str) -> Optional[models.Product]:
    return db.get(models.Product, product_id)


def get_product_by_id_or_slug(db: Session, id_or_slug: str) -> Optional[models.Product]:
    return (
        db.query(models.Product)
        .filter(or_(models.Product.id == id_or_slug, models.Product.slug == id_or_slug))
        .first()
    )


def create_product(db: Session, data: ProductIn) -> models.Product:
    slug = ensure_unique_slug(db, slugify(data.slug or data.name))
    p = models.Product(slug=slug, **data.model_dump(exclude={"slug"}))
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def update_product(db: Session, product: models.Product, data: ProductIn) -> models.Product:
    if data.slug:
        base = slugify(data.slug)
    elif data.name != product.name:
        base = slugify(data.name)
    else:
        base = product.slug
    slug = ensure_unique_slug(db, base, ignore_id=product.id)

    for field, value in data.model_dump(exclude={"slug"}).items():
        setattr(product, field, value)
    product.slug = slug
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product: models.Product) -> None:
    db.delete(product)
    db.commit()
