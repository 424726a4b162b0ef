import argparse
import logging
import sys

from golden_store.core import config
from golden_store.core.auth import hash_password
from golden_store.core.database import SessionLocal, init_db
from golden_store.models import models
from golden_store import bootstrap

_CDN = "https://pub-cdn.sider.ai/u/U0W8H7R4X2W/web-coder/68d4014e6cd86d3975e3c196/resource"

DEMO_PRODUCTS = [
    {
        "slug": "ring-aurora", "name": "Cincin Aurora", "price": 1250000,
        "image": f"{_CDN}/9fda7656-751a-44f7-925d-2983608efbf8.jpg",
        "description": "Cincin statement dengan kilau kristal yang memantulkan warna aurora. Nyaman dipakai harian maupun acara formal.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500010",
        "whatsapp_number": "6281234567890", "tags": ["Statement Ring", "Elegant", "Best Seller"],
    },
    {
        "slug": "necklace-luna", "name": "Kalung Luna", "price": 2150000,
        "image": f"{_CDN}/81d784c1-2e19-4129-a069-8279a9f905c1.jpg",
        "description": "Kalung minimalis dengan liontin bulan yang manis, cocok jadi hadiah maupun koleksi pribadi.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500011",
        "whatsapp_number": "6281234567890", "tags": ["Kalung", "Minimalist"],
    },
    {
        "slug": "bracelet-royale", "name": "Gelang Royale", "price": 1890000,
        "image": f"{_CDN}/122ce33f-63d0-4e9a-b566-29b761fbd66c.jpg",
        "description": "Gelang kombinasi metal dan aksen matte-glossy untuk tampilan modern dan berkelas.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500012",
        "whatsapp_number": "6281234567890", "tags": ["Gelang", "Modern"],
    },
    {
        "slug": "earring-eden", "name": "Anting Eden", "price": 990000,
        "image": f"{_CDN}/2347c9aa-119b-4363-8fd5-6ef36c28e237.jpg",
        "description": "Anting mungil yang ringan dengan kilau lembut, nyaman dipakai seharian.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500013",
        "whatsapp_number": "6281234567890", "tags": ["Anting", "Daily"],
    },
    {
        "slug": "watch-nova", "name": "Jam Nova", "price": 3750000,
        "image": f"{_CDN}/5bfd3a13-263a-45d5-aad4-c718dfccae52.jpg",
        "description": "Jam tangan aksesoris dengan strap metal berkilau, menunjang gaya sekaligus fungsional.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500014",
        "whatsapp_number": "6281234567890", "tags": ["Jam Tangan", "Limited"],
    },
    {
        "slug": "pendant-sol", "name": "Liontin Sol", "price": 1450000,
        "image": f"{_CDN}/14bf167b-74c5-4435-84f5-d31defc7b554.jpg",
        "description": "Liontin berbentuk matahari dengan detail kristal, simbol energi dan kebahagiaan.",
        "shopee_url": "https://shopee.co.id/product/999994567/1234500015",
        "whatsapp_number": "6281234567890", "tags": ["Liontin", "Symbolic"],
    },
]


def seed(password=None, session_factory=SessionLocal):
    """Upsert the admin, demo products and default store settings.

    Unlike bootstrap this overwrites: the admin password is reset and the
    navigation is replaced with the defaults.
    """
    password = password or config.ADMIN_SEED_PASSWORD
    init_db()
    db = session_factory()
    try:
        admin = db.query(models.Admin).filter(models.Admin.username == bootstrap.DEFAULT_ADMIN_USERNAME).first()
        if not admin:
            admin = models.Admin(username=bootstrap.DEFAULT_ADMIN_USERNAME, role="admin")
            db.add(admin)
        admin.password_hash = hash_password(password)

        for data in DEMO_PRODUCTS:
            p = db.query(models.Product).filter(models.Product.slug == data["slug"]).first()
            if not p:
                p = models.Product()
                db.add(p)
            for k, v in data.items():
                setattr(p, k, v)

        store = db.query(models.StoreSetting).filter(models.StoreSetting.key == "default").first()
        if not store:
            store = models.StoreSetting(key="default")
            db.add(store)
        for k, v in bootstrap.DEFAULT_STORE_SETTINGS.items():
            setattr(store, k, v)
        store.navigation = [models.NavigationItem(**item) for item in bootstrap.DEFAULT_NAVIGATION]
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    print(f"✅ Database seeded. Default admin: {bootstrap.DEFAULT_ADMIN_USERNAME} / {password}")


def serve(host, port):
    import uvicorn

    uvicorn.run("golden_store.main:app", host=host, port=port)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="golden-store")
    ap.add_argument("cmd", choices=["init-db", "bootstrap", "seed", "serve"])
    ap.add_argument("--host", default="0.0.0.0")
    ap.add_argument("--port", type=int, default=config.PORT)
    ap.add_argument("--password", help="admin password for seed (default: ADMIN_SEED_PASSWORD)")
    a = ap.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)

    if a.cmd == "init-db":
        init_db()
        print("✅ Schema ready.")
    elif a.cmd == "bootstrap":
        init_db()
        bootstrap.run_bootstrap()
        print("✅ Bootstrap done.")
    elif a.cmd == "seed":
        seed(a.password)
    else:
        serve(a.host, a.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
