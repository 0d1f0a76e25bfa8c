from .domain import Manifest, ManifestChunk
from .exceptions import (
    InvalidManifestError,
    ManifestEntryError,
    ManifestNotFoundError,
    SiteDataNotFoundError,
    ViteError,
)
from .host import StaticHost, ViteHost
from .helper import Vite, get_instance, reset_instance, vite

__all__ = [
    "InvalidManifestError",
    "Manifest",
    "ManifestChunk",
    "ManifestEntryError",
    "ManifestNotFoundError",
    "SiteDataNotFoundError",
    "StaticHost",
    "Vite",
    "ViteError",
    "ViteHost",
    "get_instance",
    "reset_instance",
    "vite",
]
