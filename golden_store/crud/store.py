import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from golden_store.models import models
from golden_store.schemas import NavigationItemIn, StoreSettingsIn

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


def get_store(db: Session) -> Optional[models.StoreSetting]:
    store = db.query(models.StoreSetting).filter(models.StoreSetting.key == DEFAULT_KEY).first()
    if store is None:
        # rows created before the key existed
        store = db.query(models.StoreSetting).first()
    return store


def list_navigation(db: Session, store_id: str) -> List[models.NavigationItem]:
    return (
        db.query(models.NavigationItem)
        .filter(models.NavigationItem.store_id == store_id)
        .order_by(models.NavigationItem.order.asc())
        .all()
    )


def reconcile_navigation(db: Session, store: models.StoreSetting, items: List[NavigationItemIn]) -> List[models.NavigationItem]:
    """Make the store's navigation exactly ``items``, in order.

    Items whose id names one of this store's rows update that row; anything
    else becomes a new row. Rows not kept are deleted afterwards. Runs inside
    the caller's transaction and does not commit.
    """
    keep_ids = []
    for index, item in enumerate(items):
        row = None
        # a repeated id would collapse two positions into one row
        if item.id and item.id not in keep_ids:
            row = db.get(models.NavigationItem, item.id)
            if row is not None and row.store_id != store.id:
                row = None
        if row is None:
            row = models.NavigationItem(store_id=store.id)
            db.add(row)
        row.label = item.label
        row.url = item.url
        row.order = index
        row.is_external = item.is_external
        db.flush()
        keep_ids.append(row.id)

    removed = (
        db.query(models.NavigationItem)
        .filter(models.NavigationItem.store_id == store.id, models.NavigationItem.id.notin_(keep_ids))
        .delete(synchronize_session=False)
    )
    if removed:
        logger.info("Removed %d navigation item(s) from store %s", removed, store.id)
    db.expire(store, ["navigation"])
    return list_navigation(db, store.id)


def update_store_settings(db: Session, data: StoreSettingsIn) -> models.StoreSetting:
    """Upsert the singleton settings row and reconcile navigation in one transaction."""
    try:
        store = get_store(db)
        if store is None:
            store = models.StoreSetting(key=DEFAULT_KEY, **data.store_fields())
            db.add(store)
        else:
            for field, value in data.store_fields().items():
                setattr(store, field, value)
        db.flush()

        if data.navigation is not None:
            reconcile_navigation(db, store, data.navigation)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(store)
    return store
