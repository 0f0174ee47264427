"""Load a schema document from JSON into a Schema tree.

Document shape:

    {
      "name": "PetClient",
      "url": "https://api.example.com",
      "apis": {
        "list": {"method": "GET", "url": "/pets", "params": {"limit": "number"}},
        "create": {"method": "POST", "url": "/pets", "data": {"name": "string"}},
        "owners": {"apis": {...}}
      }
    }

A node with an "apis" key is an APISet; any other node is an API.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import SchemaLoadError
from .schema import API, APISet, Context, GetAPI, Node, PostAPI, PutAPI, Schema

logger = logging.getLogger(__name__)

_API_TYPES: dict[str, type[API]] = {
    "GET": GetAPI,
    "POST": PostAPI,
    "PUT": PutAPI,
}


def load_schema(path: Path | str) -> Schema:
    """Read a JSON schema document from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            doc = json.load(f)
    except OSError as e:
        raise SchemaLoadError(f"cannot read {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise SchemaLoadError(f"cannot decode {path}: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"invalid JSON in {path}: {e}") from e
    schema = build_schema(doc)
    logger.info("Loaded schema %s from %s", schema.name, path)
    return schema


def _optional_str(node: dict[str, Any], field: str, path: str) -> str | None:
    value = node.get(field)
    if value is not None and not isinstance(value, str):
        raise SchemaLoadError(f"'{field}' must be a string", path)
    return value


def _fields(node: dict[str, Any], field: str, path: str) -> dict[str, str] | None:
    value = node.get(field)
    if value is None:
        return None
    if not isinstance(value, dict) or not all(isinstance(t, str) for t in value.values()):
        raise SchemaLoadError(f"'{field}' must map names to type strings", path)
    return value


def _build_api(node: dict[str, Any], context: Context, path: str) -> API:
    method = node.get("method")
    if not isinstance(method, str) or method.upper() not in _API_TYPES:
        raise SchemaLoadError(f"unsupported method {method!r}", path)
    method = method.upper()
    url = _optional_str(node, "url", path)

    if method == "GET":
        if "data" in node:
            raise SchemaLoadError("GET endpoints take 'params', not 'data'", path)
        return GetAPI(url, context, _fields(node, "params", path))
    if "params" in node:
        raise SchemaLoadError(f"{method} endpoints take 'data', not 'params'", path)
    return _API_TYPES[method](url, context, _fields(node, "data", path))


def _build_node(node: Any, parent: Context, path: str) -> Node:
    if not isinstance(node, dict):
        raise SchemaLoadError("expected an object", path)
    if "apis" in node and "method" in node:
        raise SchemaLoadError("node has both 'method' and 'apis'", path)
    context = parent.child()
    if "apis" not in node:
        return _build_api(node, context, path)

    apiset = APISet(
        _optional_str(node, "name", path),
        _optional_str(node, "url", path),
        context,
    )
    _add_children(apiset, node["apis"], context, path)
    return apiset


def _add_children(container: Schema | APISet, apis: Any, context: Context, path: str) -> None:
    if not isinstance(apis, dict):
        raise SchemaLoadError("'apis' must be an object", path or None)
    for key, child in apis.items():
        child_path = f"{path}.{key}" if path else key
        container.add_api(key, _build_node(child, context, child_path))


def build_schema(doc: Any) -> Schema:
    """Build a Schema from a parsed schema document."""
    if not isinstance(doc, dict):
        raise SchemaLoadError("schema document must be an object")
    context = Context()
    schema = Schema(
        _optional_str(doc, "name", ""),
        _optional_str(doc, "url", ""),
        context,
    )
    _add_children(schema, doc.get("apis", {}), context, "")
    return schema
