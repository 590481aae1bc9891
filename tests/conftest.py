"""Shared fixtures: in-memory Mongo collections and sample artworks."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from bson import ObjectId

from app.crud import artworks as artworks_crud
from app.crud import bio as bio_crud
from app.crud import site_assets as site_assets_crud
from app.models.artwork import ArtworkCategory, ArtworkInDB


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor(list):
    def limit(self, count: int) -> "FakeCursor":
        return FakeCursor(self[:count])


class FakeCollection:
    """In-memory stand-in for the subset of pymongo's Collection used by the crud modules."""

    def __init__(self):
        self.docs: list[dict] = []

    def find(self, query: dict | None = None) -> FakeCursor:
        return FakeCursor(dict(doc) for doc in self.docs if _matches(doc, query or {}))

    def find_one(self, query: dict | None = None) -> dict | None:
        found = self.find(query)
        return found[0] if found else None

    def insert_one(self, doc: dict):
        doc = dict(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def update_one(self, query: dict, update: dict, upsert: bool = False):
        for doc in self.docs:
            if _matches(doc, query):
                before = dict(doc)
                doc.update(update.get("$set", {}))
                return SimpleNamespace(modified_count=int(doc != before), upserted_id=None)
        if upsert:
            result = self.insert_one({**query, **update.get("$set", {})})
            return SimpleNamespace(modified_count=0, upserted_id=result.inserted_id)
        return SimpleNamespace(modified_count=0, upserted_id=None)

    def delete_one(self, query: dict):
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


@pytest.fixture
def fake_db(monkeypatch) -> dict[str, FakeCollection]:
    """Route every crud module to fresh in-memory collections."""
    collections: dict[str, FakeCollection] = {}

    def get_collection(name: str) -> FakeCollection:
        return collections.setdefault(name, FakeCollection())

    for module in (artworks_crud, bio_crud, site_assets_crud):
        monkeypatch.setattr(module, "get_collection", get_collection)
    return collections


BASE_TIME = datetime(2024, 6, 1, 12, 0, 0)


def make_artwork(
    artwork_id: str,
    year: int = 2024,
    category: ArtworkCategory = ArtworkCategory.PAINTING,
    title: str | None = None,
    updated_offset: int = 0,
    created_offset: int = 0,
    **fields,
) -> ArtworkInDB:
    """Build an ArtworkInDB; offsets are minutes after BASE_TIME."""
    return ArtworkInDB(
        _id=artwork_id,
        title=title or f"Artwork {artwork_id}",
        year=year,
        category=category,
        image_url=f"https://cdn.example.com/artworks/{artwork_id}.png",
        created_at=BASE_TIME + timedelta(minutes=created_offset),
        updated_at=BASE_TIME + timedelta(minutes=updated_offset),
        **fields,
    )


@pytest.fixture
def artwork_factory():
    return make_artwork
