"""
KB Notes Backend — Pretty-Printed JSON Responses
=================================================

What:  JSONResponse variant that indents its body.
Why:   The API is read mostly by people (curl, browser); every response,
       errors included, is pretty-printed.
How:   Installed as the app's default_response_class and used directly by
       the exception handlers.
"""

import json
from typing import Any

from starlette.responses import JSONResponse

from kbnotes.config import settings


class IndentedJSONResponse(JSONResponse):
    """JSON response indented by `settings.json_indent` spaces (compact when 0)."""

    def render(self, content: Any) -> bytes:
        indent = settings.json_indent or None
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=(",", ": ") if indent else (",", ":"),
        ).encode("utf-8")
