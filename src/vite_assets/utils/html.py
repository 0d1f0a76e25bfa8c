"""
HTML fragment rendering for the tag helpers.

Everything returned here is a `markupsafe.Markup`, so it can be dropped into an
autoescaping template without being escaped a second time.
"""

import json
from typing import Any, Mapping, Optional

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def _attr_value(value: Any) -> Optional[Markup]:
    if value is None or value is False:
        return None
    if isinstance(value, (list, tuple)):
        rendered = Markup(" ").join(escape(item) for item in value if item not in (None, ""))
    else:
        rendered = escape(value)
    return rendered or None


def attr(attrs: Optional[Mapping[str, Any]] = None) -> Markup:
    """
    Render a mapping as an HTML attribute string.

    Attributes are sorted by name and names are lower-cased. `None`, `False`,
    empty strings and empty lists are dropped, `True` renders the bare name,
    lists are joined with spaces. Values are HTML-escaped.

    Example:
    ```python
    attr({"type": "module", "src": "/dist/index.js", "defer": True})
    # 'defer src="/dist/index.js" type="module"'
    ```
    """
    parts = []
    for name in sorted(attrs or {}):
        value = attrs[name]  # type: ignore[index]
        if value is True:
            parts.append(escape(name.lower()))
            continue
        rendered = _attr_value(value)
        if rendered is None:
            continue
        parts.append(Markup('{}="{}"').format(name.lower(), rendered))
    return Markup(" ").join(parts)


def tag(name: str, content: Any = "", attrs: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render an element. Void elements never get content or a closing tag."""
    attributes = attr(attrs)
    opening = Markup("<{} {}>").format(name, attributes) if attributes else Markup("<{}>").format(name)
    if name.lower() in VOID_ELEMENTS:
        return opening
    return opening + escape(content) + Markup("</{}>").format(name)


def script(src: str, attrs: Optional[Mapping[str, Any]] = None) -> Markup:
    return tag("script", "", {**(attrs or {}), "src": src})


def json_encode(data: Any) -> str:
    """Compact JSON with slashes and non-ASCII characters left as they are."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
