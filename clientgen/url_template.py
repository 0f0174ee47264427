"""Turn parameterized URL templates into TypeScript URL expressions.

Template grammar:
  - literal text is copied verbatim
  - <name> declares a parameter of type 'any'
  - <name:type> declares a parameter of the given type

Examples:
  /users/<id>/         -> "/users/" + id + "/"        [id: any]
  /users/<id:number>   -> "/users/" + id              [id: number]
  /static/logo.png     -> "/static/logo.png"          []
"""

from __future__ import annotations

from .errors import MalformedTemplateError
from .ts import TSArg, quote_literal

DEFAULT_PARAM_TYPE = "any"


def template_to_expression(url: str) -> tuple[str, list[TSArg]]:
    """Parse a URL template.

    Returns the expression that builds the URL at runtime and the
    parameters in the order their tokens close. Raises
    MalformedTemplateError with the offending character and its index.
    """
    args: list[TSArg] = []
    segments: list[str] = []
    literal = ""
    in_token = False
    in_type = False
    name = ""
    type_ = ""

    for idx, c in enumerate(url):
        if not in_token:
            if c == ">":
                raise MalformedTemplateError(c, idx)
            if c == "<":
                if literal:
                    segments.append(quote_literal(literal))
                    literal = ""
                in_token = True
                continue
            literal += c
            continue

        if c == "<":
            raise MalformedTemplateError(c, idx)
        if c == ">":
            if in_type and not type_:
                raise MalformedTemplateError(c, idx)
            if not name:
                raise MalformedTemplateError(c, idx)
            args.append(TSArg(name, type_ or DEFAULT_PARAM_TYPE))
            segments.append(name)
            name = ""
            type_ = ""
            in_token = False
            in_type = False
        elif c == ":":
            if in_type:
                raise MalformedTemplateError(c, idx)
            in_type = True
        elif in_type:
            type_ += c
        else:
            name += c

    # An unterminated token is dropped along with its partial name.
    if literal:
        segments.append(quote_literal(literal))
    return " + ".join(segments), args
