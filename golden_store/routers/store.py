from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from golden_store.bootstrap import DEFAULT_NAVIGATION, DEFAULT_STORE_SETTINGS, ensure_bootstrap
from golden_store.core import config
from golden_store.core.auth import get_current_admin
from golden_store.core.database import get_db, require_online
from golden_store.crud import store as crud
from golden_store.schemas import StoreSettingsIn, StoreSettingsOut

router = APIRouter(prefix="/api/store", tags=["store"], dependencies=[Depends(ensure_bootstrap)])


def default_settings() -> StoreSettingsOut:
    navigation = [{"id": f"default-{i}", **item} for i, item in enumerate(DEFAULT_NAVIGATION)]
    return StoreSettingsOut(id=None, key=crud.DEFAULT_KEY, navigation=navigation, **DEFAULT_STORE_SETTINGS)


@router.get("/settings", response_model=StoreSettingsOut)
def get_settings(db: Session = Depends(get_db)):
    if config.OFFLINE_MODE:
        return default_settings()
    store = crud.get_store(db)
    if store is None:
        return default_settings()
    return store


@router.put("/settings", response_model=StoreSettingsOut, dependencies=[Depends(require_online)])
def put_settings(b: StoreSettingsIn, claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    return crud.update_store_settings(db, b)
