from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from golden_store.bootstrap import ensure_bootstrap
from golden_store.core import config
from golden_store.core.auth import get_current_admin
from golden_store.core.database import get_db, require_online
from golden_store.core.errors import NotFound
from golden_store.crud import products as crud
from golden_store.schemas import MessageOut, ProductIn, ProductOut

router = APIRouter(prefix="/api/products", tags=["products"], dependencies=[Depends(ensure_bootstrap)])

_needs_db = [Depends(require_online)]


def _existing(db: Session, product_id: str):
    p = crud.get_product(db, product_id)
    if p is None:
        raise NotFound("Product not found.")
    return p


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    if config.OFFLINE_MODE:
        return []
    return crud.list_products(db)


@router.get("/{id_or_slug}", response_model=ProductOut)
def get_product(id_or_slug: str, db: Session = Depends(get_db)):
    if config.OFFLINE_MODE:
        raise NotFound("Product not found.")
    p = crud.get_product_by_id_or_slug(db, id_or_slug)
    if p is None:
        raise NotFound("Product not found.")
    return p


@router.post("", response_model=ProductOut, status_code=201, dependencies=_needs_db)
def create_product(b: ProductIn, claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    return crud.create_product(db, b)


@router.put("/{product_id}", response_model=ProductOut, dependencies=_needs_db)
def update_product(product_id: str, b: ProductIn, claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    return crud.update_product(db, _existing(db, product_id), b)


@router.delete("/{product_id}", response_model=MessageOut, dependencies=_needs_db)
def delete_product(product_id: str, claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    crud.delete_product(db, _existing(db, product_id))
    return {"message": "Product deleted."}
