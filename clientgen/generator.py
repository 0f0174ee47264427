"""Build a TypeScript client module from a Schema.

One pre-order walk over the schema tree:
  - the schema becomes an exported root class
  - every API becomes an async method on its parent class
  - every APISet becomes a non-exported class, reachable from its parent
    through a getter named after the APISet's key

URLs are emitted as written in the schema (or a placeholder when absent);
URL templates are not expanded here, see url_template.template_to_expression.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .schema import API, APISet, GetAPI, Node, PostAPI, Schema
from .sinks import OutputSink, StdoutSink
from .ts import TSArg, TSClass, TSImport, TSMethod, TSModule, TSProp

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_NAME = "XSClient"
URL_PLACEHOLDER = "TODO"
APISET_SUFFIX = "APISet"


@dataclass
class GeneratorOptions:
    default_client_name: str = DEFAULT_CLIENT_NAME
    url_placeholder: str = URL_PLACEHOLDER
    apiset_suffix: str = APISET_SUFFIX
    # Emit `import axios from "axios";` ahead of the classes.
    transport_import: bool = True


def apiset_class_name(key: str, apiset: APISet, suffix: str = APISET_SUFFIX) -> str:
    """Class name for an APISet: its own name, else derived from its key."""
    if apiset.name is not None:
        return apiset.name
    return key[:1].upper() + key[1:] + suffix


def _args(fields: dict[str, str] | None) -> list[TSArg]:
    if fields is None:
        return []
    return [TSArg(name, type_) for name, type_ in fields.items()]


class TypeScriptGenerator:
    """Generate TypeScript client source for one schema."""

    def __init__(
        self,
        schema: Schema,
        sink: OutputSink | None = None,
        options: GeneratorOptions | None = None,
    ) -> None:
        self.schema = schema
        self.sink = sink if sink is not None else StdoutSink()
        self.options = options or GeneratorOptions()

    def _build_method(self, key: str, api: API) -> TSMethod:
        param_args: list[TSArg] = []
        data_args: list[TSArg] = []
        if isinstance(api, GetAPI):
            param_args = _args(api.params)
        elif isinstance(api, PostAPI):
            data_args = _args(api.data)
        # PutAPI carries payload fields too, but they are not emitted.

        url = api.url if api.url is not None else self.options.url_placeholder
        return TSMethod(url, key, api.method.lower(), param_args, data_args)

    def _build_node(self, module: TSModule, parent: TSClass, key: str, node: Node) -> None:
        if isinstance(node, API):
            logger.debug("Adding %s %s to %s", node.method, key, parent.name)
            parent.add_method(self._build_method(key, node))
        elif isinstance(node, APISet):
            cls_name = apiset_class_name(key, node, self.options.apiset_suffix)
            logger.debug("Adding API set %s as %s.%s", cls_name, parent.name, key)
            cls = TSClass(cls_name, exported=False)
            module.add_class(cls)
            parent.add_prop(TSProp(key, cls_name))
            for child_key, child in node.apis.items():
                self._build_node(module, cls, child_key, child)
        else:
            raise TypeError(f"Unsupported schema node for {key!r}: {type(node).__name__}")

    def build(self) -> TSModule:
        """Assemble the module IR for the schema."""
        module = TSModule()
        if self.options.transport_import:
            module.add_import(TSImport("axios", default="axios"))

        name = self.schema.name
        if name is None:
            name = self.options.default_client_name
        root = TSClass(name)
        module.add_class(root)
        for key, node in self.schema.apis.items():
            self._build_node(module, root, key, node)
        return module

    def generate(self) -> str:
        """Return the generated source text."""
        module = self.build()
        logger.debug("Built %d classes for %s", len(module.classes), module.classes[0].name)
        return module.render()

    def render(self) -> str:
        """Generate the source text and write it to the sink."""
        text = self.generate()
        self.sink.write(text)
        return text
