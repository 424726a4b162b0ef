"""Validated request bodies and response records.

Request models normalise the loosely-typed JSON the admin panel sends
(trimming strings, turning blanks into ``None``) and reject anything that
would violate a column constraint before a session is touched. Field names
are camelCase on the wire.
"""
import math
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# fits a 32-bit INTEGER column on every backend
MAX_PRICE = 2147483647


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _clean_nullable(v: Any) -> Optional[str]:
    if not isinstance(v, str):
        return None
    v = v.strip()
    return v or None


# ---- auth / profile ----

class LoginBody(CamelModel):
    username: str = ""
    password: str = ""


class ProfileUpdate(CamelModel):
    username: str = ""
    password: Optional[str] = None


class AdminOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    username: str
    role: str


class TokenOut(CamelModel):
    token: str
    user: AdminOut


# ---- products ----

class ProductIn(CamelModel):
    name: str
    price: int
    image: str
    description: str
    shopee_url: str
    whatsapp_number: Optional[str] = None
    tags: List[str] = []
    slug: Optional[str] = None

    @field_validator("name", "description", "image", "shopee_url", mode="before")
    @classmethod
    def _required_text(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Fields name, description, image and shopeeUrl are required.")
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, v):
        try:
            parsed = float(v)
        except (TypeError, ValueError):
            raise ValueError("Price must be a non-negative number.")
        if not math.isfinite(parsed) or parsed < 0:
            raise ValueError("Price must be a non-negative number.")
        # half-up, not banker's rounding
        price = int(math.floor(parsed + 0.5))
        if price > MAX_PRICE:
            raise ValueError(f"Price must not exceed {MAX_PRICE}.")
        return price

    @field_validator("whatsapp_number", "slug", mode="before")
    @classmethod
    def _optional_text(cls, v):
        if v is None or v == "" or v is False:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v):
        if not isinstance(v, list):
            return []
        return [t for t in (str(x).strip() for x in v) if t]


class ProductOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    slug: str
    name: str
    price: int
    image: str
    description: str
    shopee_url: str
    whatsapp_number: Optional[str] = None
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---- store settings ----

class NavigationItemIn(CamelModel):
    id: Optional[str] = None
    label: str = Field("", validate_default=True)
    url: str = Field("", validate_default=True)
    is_external: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        return _clean_nullable(v)

    @field_validator("label", "url", mode="before")
    @classmethod
    def _label_url(cls, v):
        v = v.strip() if isinstance(v, str) else ""
        if not v:
            raise ValueError("Every navigation item needs a label and url.")
        return v

    @field_validator("is_external", mode="before")
    @classmethod
    def _is_external(cls, v):
        return bool(v)


class StoreSettingsIn(CamelModel):
    store_name: str
    hero_headline: str
    hero_tagline: str
    hero_description: str
    hero_image: str
    logo_url: Optional[str] = None
    whatsapp_number: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    shopee: Optional[str] = None
    navigation: Optional[List[NavigationItemIn]] = None

    @field_validator("store_name", "hero_headline", "hero_tagline", "hero_description", "hero_image", mode="before")
    @classmethod
    def _required_text(cls, v, info):
        if not isinstance(v, str) or not v.strip():
            raise ValueError(f"Field {to_camel(info.field_name)} is required.")
        return v.strip()

    @field_validator("logo_url", "whatsapp_number", "instagram", "facebook", "tiktok", "shopee", mode="before")
    @classmethod
    def _nullable(cls, v):
        return _clean_nullable(v)

    @field_validator("navigation", mode="before")
    @classmethod
    def _navigation(cls, v):
        if v is not None and not isinstance(v, list):
            raise ValueError("Navigation must be an array.")
        return v

    def store_fields(self) -> dict:
        return self.model_dump(exclude={"navigation"})


class NavigationItemOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    label: str
    url: str
    order: int
    is_external: bool


class StoreSettingsOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: Optional[str] = None
    key: str = "default"
    store_name: str
    logo_url: Optional[str] = None
    hero_headline: str
    hero_tagline: str
    hero_description: str
    hero_image: str
    whatsapp_number: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None
    shopee: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    navigation: List[NavigationItemOut] = []


class MessageOut(BaseModel):
    message: str
