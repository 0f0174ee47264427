"""Generate TypeScript API clients from an in-memory API schema."""

from .errors import ClientGenError, MalformedTemplateError, SchemaLoadError
from .generator import GeneratorOptions, TypeScriptGenerator
from .schema import API, APISet, Context, GetAPI, PostAPI, PutAPI, Schema
from .url_template import template_to_expression

__all__ = [
    "API",
    "APISet",
    "ClientGenError",
    "Context",
    "GeneratorOptions",
    "GetAPI",
    "MalformedTemplateError",
    "PostAPI",
    "PutAPI",
    "Schema",
    "SchemaLoadError",
    "TypeScriptGenerator",
    "template_to_expression",
]
