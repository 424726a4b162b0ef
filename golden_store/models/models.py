import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from golden_store.core.database import Base


def _uuid():
    return str(uuid.uuid4())


def _now():
    return datetime.now(timezone.utc)


class Admin(Base):
    __tablename__ = "admins"
    id = Column(String(36), primary_key=True, default=_uuid)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String(32), nullable=False, default="admin")
    created_at = Column(DateTime(timezone=True), default=_now)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)


class Product(Base):
    __tablename__ = "products"
    id = Column(String(36), primary_key=True, default=_uuid)
    slug = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Integer, nullable=False)
    image = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    shopee_url = Column(String, nullable=False)
    whatsapp_number = Column(String)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)


class StoreSetting(Base):
    __tablename__ = "store_settings"
    id = Column(String(36), primary_key=True, default=_uuid)
    key = Column(String, unique=True, default="default")
    store_name = Column(String, nullable=False)
    logo_url = Column(String)
    hero_headline = Column(String, nullable=False)
    hero_tagline = Column(String, nullable=False)
    hero_description = Column(Text, nullable=False)
    hero_image = Column(String, nullable=False)
    whatsapp_number = Column(String)
    instagram = Column(String)
    facebook = Column(String)
    tiktok = Column(String)
    shopee = Column(String)
    created_at = Column(DateTime(timezone=True), default=_now)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)
    navigation = relationship(
        "NavigationItem",
        back_populates="store",
        order_by="NavigationItem.order",
        cascade="all, delete-orphan",
    )


class NavigationItem(Base):
    __tablename__ = "navigation_items"
    id = Column(String(36), primary_key=True, default=_uuid)
    store_id = Column(String(36), ForeignKey("store_settings.id", ondelete="CASCADE"), nullable=False, index=True)
    label = Column(String, nullable=False)
    url = Column(String, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    is_external = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=_now)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)
    store = relationship("StoreSetting", back_populates="navigation")
