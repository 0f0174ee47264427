"""In-memory model of a hierarchical HTTP API.

A Schema holds endpoints (API) and endpoint groups (APISet) under string
keys. Groups nest arbitrarily. Every node carries a Context, a scope
chained to its parent's scope.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

_MISSING = object()


class Context:
    """Parent-linked scope. Lookups that miss locally go to the parent."""

    def __init__(
        self,
        values: dict[str, Any] | None = None,
        parent: Context | None = None,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._parent = parent

    @property
    def parent(self) -> Context | None:
        return self._parent

    def child(self, **values: Any) -> Context:
        """Create a scope whose parent is this one."""
        return Context(values, parent=self)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def lookup(self, key: str, default: Any = None) -> Any:
        """Return the nearest value for key, or default at the root."""
        value = self._find(key)
        return default if value is _MISSING else value

    def _find(self, key: str) -> Any:
        scope: Context | None = self
        while scope is not None:
            if key in scope._values:
                return scope._values[key]
            scope = scope._parent
        return _MISSING

    def __getitem__(self, key: str) -> Any:
        value = self._find(key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: str) -> bool:
        return self._find(key) is not _MISSING


class API(ABC):
    """A single endpoint with a fixed HTTP verb.

    Subclasses set `method` as a class attribute.
    """

    tag: ClassVar[str] = "api"

    @property
    @abstractmethod
    def method(self) -> str:
        """Upper-case HTTP verb."""

    def __init__(self, url: str | None = None, context: Context | None = None) -> None:
        self._url = url
        self._context = context if context is not None else Context()

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def context(self) -> Context:
        return self._context

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self._url!r})"


class PayloadData:
    """Request-body fields shared by POST and PUT endpoints."""

    _data: dict[str, str] | None

    @property
    def data(self) -> dict[str, str] | None:
        """Payload field names mapped to their types, in declared order."""
        return self._data


class GetAPI(API):
    method = "GET"

    def __init__(
        self,
        url: str | None = None,
        context: Context | None = None,
        params: dict[str, str] | None = None,
    ) -> None:
        super().__init__(url, context)
        self._params = dict(params) if params is not None else None

    @property
    def params(self) -> dict[str, str] | None:
        """Query parameter names mapped to their types, in declared order."""
        return self._params


class PostAPI(PayloadData, API):
    method = "POST"

    def __init__(
        self,
        url: str | None = None,
        context: Context | None = None,
        data: dict[str, str] | None = None,
    ) -> None:
        super().__init__(url, context)
        self._data = dict(data) if data is not None else None


class PutAPI(PayloadData, API):
    method = "PUT"

    def __init__(
        self,
        url: str | None = None,
        context: Context | None = None,
        data: dict[str, str] | None = None,
    ) -> None:
        super().__init__(url, context)
        self._data = dict(data) if data is not None else None


class _Container:
    """Keyed, insertion-ordered collection of child nodes."""

    def __init__(
        self,
        name: str | None = None,
        url: str | None = None,
        context: Context | None = None,
    ) -> None:
        self._name = name
        self._url = url
        self._context = context if context is not None else Context()
        self._apis: dict[str, Node] = {}

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def context(self) -> Context:
        return self._context

    @property
    def apis(self) -> dict[str, Node]:
        return self._apis

    def add_api(self, key: str, api: Node) -> None:
        """Register a child under key. An existing child is replaced."""
        self._apis[key] = api


class APISet(_Container):
    """A named or anonymous group of endpoints and sub-groups."""

    tag: ClassVar[str] = "apiset"

    def __repr__(self) -> str:
        return f"APISet(name={self._name!r}, apis={list(self._apis)})"


class Schema(_Container):
    """Root of an API description."""

    def __repr__(self) -> str:
        return f"Schema(name={self._name!r}, apis={list(self._apis)})"


Node = Union[API, APISet]
