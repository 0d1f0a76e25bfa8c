"""
Utility functions for vite_assets.
"""

from .html import attr, json_encode, script, tag
from .misc import ucfirst, url_path

__all__ = [
    "attr",
    "json_encode",
    "script",
    "tag",
    "ucfirst",
    "url_path",
]
