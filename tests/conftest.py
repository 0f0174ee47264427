"""Shared fixtures for clientgen tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from clientgen.schema import APISet, Context, GetAPI, PostAPI, PutAPI, Schema


# ---------------------------------------------------------------------------
# Schema trees
# ---------------------------------------------------------------------------

@pytest.fixture
def pet_schema() -> Schema:
    """A small schema with a top-level endpoint and two nested groups."""
    root = Context({"baseUrl": "https://pets.example.com"})
    schema = Schema("PetClient", "https://pets.example.com", root)
    schema.add_api("ping", GetAPI("/ping", root))

    pets = APISet(None, "/pets", root.child())
    pets.add_api("list", GetAPI("/pets", pets.context, {"page": "number", "size": "number"}))
    pets.add_api("create", PostAPI("/pets", pets.context, {"name": "string", "tag": "string"}))
    pets.add_api("replace", PutAPI("/pets/<id>", pets.context, {"name": "string"}))

    owners = APISet("Owners", "/owners", pets.context.child())
    owners.add_api("find", GetAPI(None, owners.context))
    pets.add_api("owners", owners)

    schema.add_api("pets", pets)
    return schema


# ---------------------------------------------------------------------------
# Schema documents on disk
# ---------------------------------------------------------------------------

_PET_DOCUMENT: dict = {
    "name": "PetClient",
    "url": "https://pets.example.com",
    "apis": {
        "ping": {"method": "GET", "url": "/ping"},
        "pets": {
            "url": "/pets",
            "apis": {
                "list": {"method": "get", "url": "/pets", "params": {"page": "number"}},
                "create": {"method": "POST", "url": "/pets", "data": {"name": "string"}},
                "replace": {"method": "PUT", "data": {"name": "string"}},
            },
        },
    },
}


@pytest.fixture
def write_document(tmp_path: Path):
    """Return a callable that dumps a document to a JSON file and returns its path."""
    def _write(doc, name: str = "schema.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(doc), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def pet_document() -> dict:
    """A JSON schema document mirroring pet_schema."""
    return copy.deepcopy(_PET_DOCUMENT)
