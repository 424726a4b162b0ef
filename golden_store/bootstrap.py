"""First-use seeding of the admin account and the store settings row.

``ensure_bootstrap`` is safe to call from every request: the first caller
does the work while holding a process-wide lock, callers arriving meanwhile
wait on that lock, and everything after that is a flag check. A run that
raises leaves the flag unset so the next request tries again.
"""
import logging
import threading

from golden_store.core import config
from golden_store.core.auth import hash_password
from golden_store.core.database import SessionLocal
from golden_store.models import models

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"

DEFAULT_STORE_SETTINGS = {
    "store_name": "Golden Store",
    "logo_url": "https://pub-cdn.sider.ai/u/U0W8H7R4X2W/web-coder/68d4014e6cd86d3975e3c196/resource/55a4522f-969b-4e9f-b5a4-8f67ffc837e4.jpg",
    "hero_headline": "Koleksi Aksesoris dengan Desain Sticker yang menarik",
    "hero_tagline": "untuk Gaya Sehari-hari",
    "hero_description": (
        "Temukan aksesoris pilihan dari Golden Store. Desain menarik, kualitas terjamin, "
        "dan harga bersahabat, cocok untuk hadiah maupun koleksi pribadi."
    ),
    "hero_image": "https://i.imghippo.com/files/Cwuh6142fk.jpeg",
    "whatsapp_number": "6281234567890",
    "instagram": "https://instagram.com/yourstore",
    "facebook": "https://facebook.com/yourstore",
    "tiktok": "https://tiktok.com/@yourstore",
    "shopee": "https://shopee.co.id/yourstore",
}

DEFAULT_NAVIGATION = [
    {"label": "Home", "url": "#home", "order": 0, "is_external": False},
    {"label": "Produk", "url": "#produk", "order": 1, "is_external": False},
    {"label": "Shopee", "url": DEFAULT_STORE_SETTINGS["shopee"], "order": 2, "is_external": True},
]


def ensure_default_admin(db) -> bool:
    password = config.ADMIN_DEFAULT_PASSWORD
    if not password:
        return False
    if db.query(models.Admin).count() > 0:
        return False
    db.add(models.Admin(username=DEFAULT_ADMIN_USERNAME, password_hash=hash_password(password), role="admin"))
    db.commit()
    logger.info("Default admin account created (username: %s)", DEFAULT_ADMIN_USERNAME)
    return True


def ensure_store_settings(db) -> models.StoreSetting:
    store = db.query(models.StoreSetting).first()
    if store is None:
        store = models.StoreSetting(key="default", **DEFAULT_STORE_SETTINGS)
        store.navigation = [models.NavigationItem(**item) for item in DEFAULT_NAVIGATION]
        db.add(store)
        db.commit()
        logger.info("Default store settings created")
        return store

    if not store.key:
        store.key = "default"
        db.commit()

    nav_count = db.query(models.NavigationItem).filter(models.NavigationItem.store_id == store.id).count()
    if nav_count == 0:
        db.add_all([models.NavigationItem(store_id=store.id, **item) for item in DEFAULT_NAVIGATION])
        db.commit()
        logger.info("Default navigation restored for store %s", store.id)
    return store


def run_bootstrap(session_factory=SessionLocal) -> None:
    db = session_factory()
    try:
        ensure_default_admin(db)
        ensure_store_settings(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


class _Once:
    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self, fn, *args, **kwargs) -> None:
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            fn(*args, **kwargs)
            self._done = True

    def reset(self) -> None:
        with self._lock:
            self._done = False


_bootstrap_once = _Once()


def ensure_bootstrap() -> None:
    """FastAPI dependency; a no-op in offline mode."""
    if config.OFFLINE_MODE:
        return
    _bootstrap_once(run_bootstrap)


def reset_bootstrap() -> None:
    _bootstrap_once.reset()
