import re

import pytest

from golden_store.core import config
from golden_store.core.errors import Conflict
from golden_store.crud import products as crud
from golden_store.models import models


def _product(db, slug, **kw):
    p = models.Product(
        slug=slug, name=kw.get("name", slug), price=1000, image="https://cdn.example.com/p.jpg",
        description="d", shopee_url="https://shopee.co.id/p", tags=[],
    )
    db.add(p)
    db.commit()
    return p


@pytest.mark.parametrize("text,expected", [
    ("Cincin Aurora", "cincin-aurora"),
    ("  Gelang -- Royale!! ", "gelang-royale"),
    ("Jam_Nova 2024", "jam-nova-2024"),
    ("--edge--", "edge"),
    ("Kalung Luna ✨", "kalung-luna"),
])
def test_slugify(text, expected):
    assert crud.slugify(text) == expected


def test_slugify_truncates():
    assert len(crud.slugify("x" * 200)) == config.SLUG_MAX_LENGTH


def test_slugify_falls_back_to_timestamp():
    assert re.fullmatch(r"produk-\d+", crud.slugify("!!! ???"))


def test_free_slug_is_returned_as_is(db):
    assert crud.ensure_unique_slug(db, "ring-aurora") == "ring-aurora"


def test_taken_slug_gets_sequential_suffix(db):
    _product(db, "ring")
    _product(db, "ring-1")
    assert crud.ensure_unique_slug(db, "ring") == "ring-2"


def test_own_slug_is_reused_on_update(db):
    p = _product(db, "ring")
    assert crud.ensure_unique_slug(db, "ring", ignore_id=p.id) == "ring"


def test_other_records_slug_is_not_reused(db):
    _product(db, "ring")
    other = _product(db, "bracelet")
    assert crud.ensure_unique_slug(db, "ring", ignore_id=other.id) == "ring-1"


def test_suffix_stays_within_max_length(db):
    base = "a" * config.SLUG_MAX_LENGTH
    _product(db, base)
    slug = crud.ensure_unique_slug(db, base)
    assert slug != base
    assert slug.endswith("-1")
    assert len(slug) == config.SLUG_MAX_LENGTH


def test_allocator_never_returns_a_taken_slug(db):
    taken = {"bag", "bag-1", "bag-2", "bag-4"}
    for s in taken:
        _product(db, s)
    slug = crud.ensure_unique_slug(db, "bag")
    assert slug not in taken
    assert slug == "bag-3"


def test_allocator_gives_up_after_max_attempts(db, monkeypatch):
    monkeypatch.setattr(config, "SLUG_MAX_ATTEMPTS", 2)
    _product(db, "hat")
    _product(db, "hat-1")
    _product(db, "hat-2")
    with pytest.raises(Conflict):
        crud.ensure_unique_slug(db, "hat")
