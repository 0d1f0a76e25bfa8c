from typing import Optional
from urllib.parse import urlparse


def url_path(url: Optional[str], leading_slash: bool = False, trailing_slash: bool = False) -> str:
    """
    Reduce a URL, or a bare path slug, to its path.
    Empty or missing input gives an empty string regardless of the slash flags.
    Example:
    ```python
    url_path("api", leading_slash=True)  # "/api"
    url_path("https://example.com/content/api/", leading_slash=True)  # "/content/api"
    ```
    """
    if not url or not url.strip():
        return ""
    path = urlparse(url.strip()).path.strip("/")
    if not path:
        return ""
    return ("/" if leading_slash else "") + path + ("/" if trailing_slash else "")


def ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]
