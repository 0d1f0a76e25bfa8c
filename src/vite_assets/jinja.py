"""
Jinja2 integration.

```python
from jinja2 import Environment, FileSystemLoader
from vite_assets.jinja import install_vite

env = install_vite(Environment(loader=FileSystemLoader("templates"), autoescape=True), vite)
```

Templates then call the helper directly:

```jinja
<head>
  {{ vite.css() }}
  {{ vite.preload_json(page.id) }}
</head>
<body>
  {{ vite.js() }}
</body>
```

Tag helpers return `Markup`, so autoescaping leaves them untouched.
"""

import functools
from typing import Any, Optional

from jinja2 import Environment
from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from .helper import Vite, get_instance
from .utils.html import json_encode

GLOBAL_NAME = "vite"


class TemplateVite:
    """
    Template view of a `Vite` helper.
    Methods returning None (e.g. `css()` in development mode) return empty markup
    instead, so templates do not print "None".
    `json()` returns markup safe to place inside `<script>`, so autoescaping does not mangle it.
    """

    def __init__(self, vite: Vite):
        self._vite = vite

    def __getattr__(self, name: str) -> Any:
        value = getattr(self._vite, name)
        if not callable(value):
            return value

        @functools.wraps(value)
        def call(*args: Any, **kwargs: Any) -> Any:
            result = value(*args, **kwargs)
            return Markup("") if result is None else result

        return call

    def json(self, data: Any) -> Markup:
        return htmlsafe_json_dumps(data, dumps=json_encode)

    def __repr__(self) -> str:
        return f"TemplateVite({self._vite!r})"


def install_vite(env: Environment, vite: Optional[Vite] = None) -> Environment:
    """Register the helper as the `vite` template global. Without `vite`, the process-wide helper is used."""
    env.globals[GLOBAL_NAME] = TemplateVite(vite if vite is not None else get_instance())
    return env
