"""Renderable TypeScript building blocks.

Each node renders itself through a Jinja2 template in templates/.
Rendering depends only on the node's own fields, so rendering the same
node twice yields the same text.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple, Protocol, Sequence

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"


class Renderable(Protocol):
    def render(self) -> str: ...


class TSArg(NamedTuple):
    """A typed function argument."""

    name: str
    type: str


def quote_literal(value: str) -> str:
    """Quote a string as a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


@lru_cache(maxsize=None)
def get_environment() -> jinja2.Environment:
    """Return the shared template environment."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["quote"] = quote_literal
    return env


def _render(template_name: str, **context) -> str:
    return get_environment().get_template(template_name).render(**context)


def render_object(entries: Sequence[tuple[str, str]]) -> str:
    """Render an object literal with quoted keys and verbatim values."""
    return _render("object.ts.j2", entries=entries)


class TSImport:
    """An import statement: import def, {a, b} from "path";"""

    def __init__(
        self,
        path: str,
        default: str | None = None,
        members: Sequence[str] = (),
    ) -> None:
        self.path = path
        self.default = default
        self.members = list(members)

    def render(self) -> str:
        bindings = []
        if self.default:
            bindings.append(self.default)
        if self.members:
            bindings.append("{" + ", ".join(self.members) + "}")
        return _render("import.ts.j2", path=self.path, bindings=bindings)


class TSMethod:
    """An async method issuing one axios request."""

    def __init__(
        self,
        url: str,
        name: str,
        method: str,
        param_args: Sequence[TSArg],
        data_args: Sequence[TSArg],
        is_public: bool = True,
    ) -> None:
        self.url = url
        self.name = name
        self.method = method
        self.param_args = list(param_args)
        self.data_args = list(data_args)
        self.is_public = is_public

    def _render_request_config(self) -> str:
        entries = [
            ("url", quote_literal(self.url)),
            ("method", quote_literal(self.method)),
        ]
        if self.param_args:
            entries.append(("params", render_object([(a.name, a.name) for a in self.param_args])))
        if self.data_args:
            entries.append(("data", render_object([(a.name, a.name) for a in self.data_args])))
        return render_object(entries)

    def render(self) -> str:
        return _render(
            "method.ts.j2",
            name=self.name,
            is_public=self.is_public,
            args=self.param_args + self.data_args,
            config=self._render_request_config(),
        )


class TSProp:
    """A getter returning a fresh instance of a nested API-set class."""

    def __init__(self, name: str, apiset_cls_name: str, is_public: bool = True) -> None:
        self.name = name
        self.apiset_cls_name = apiset_cls_name
        self.is_public = is_public

    def render(self) -> str:
        return _render(
            "property.ts.j2",
            name=self.name,
            cls_name=self.apiset_cls_name,
            is_public=self.is_public,
        )


class TSClass:
    """A class holding methods followed by properties."""

    def __init__(self, name: str, exported: bool = True) -> None:
        self.name = name
        self.exported = exported
        self.methods: list[TSMethod] = []
        self.props: list[TSProp] = []

    def add_method(self, method: TSMethod) -> None:
        self.methods.append(method)

    def add_prop(self, prop: TSProp) -> None:
        self.props.append(prop)

    def render(self) -> str:
        members = [m.render().rstrip("\n") for m in self.methods]
        members += [p.render().rstrip("\n") for p in self.props]
        return _render("class.ts.j2", name=self.name, exported=self.exported, members=members)


class TSModule:
    """A source file: imports, then classes, in registration order."""

    def __init__(self) -> None:
        self.imports: list[TSImport] = []
        self.classes: list[TSClass] = []

    def add_import(self, imp: TSImport) -> None:
        self.imports.append(imp)

    def add_class(self, cls: TSClass) -> None:
        self.classes.append(cls)

    def render(self) -> str:
        units: list[Renderable] = [*self.imports, *self.classes]
        return "".join(unit.render() for unit in units)
