import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from markupsafe import Markup

from .domain import (
    API_SLUG_ENV_VAR,
    DEFAULT_DEV_SERVER,
    DEFAULT_ENTRY,
    DEFAULT_OUT_DIR,
    DEVELOPMENT_MODE,
    LOCK_FILE,
    MANIFEST_FILENAME,
    MODE_ENV_VAR,
    OPTION_DEBUG,
    OPTION_DEV_SERVER,
    OPTION_ENTRY,
    OPTION_OUT_DIR,
    SITE_DATA_FILENAME,
    VITE_CLIENT,
    Manifest,
)
from .exceptions import ManifestEntryError, ManifestNotFoundError, SiteDataNotFoundError, ViteError
from .host import ViteHost
from .manifest import find_chunk_by_suffix, get_imported_files, load_json_object, read_manifest
from .utils.html import json_encode, script, tag
from .utils.misc import ucfirst, url_path

logger = logging.getLogger(__name__)


class Vite:
    """
    Vite is the template-facing helper that turns Vite entries into `<script>` and `<link>` tags.

    In development mode tags point at the Vite dev server, in production mode at the
    hashed files listed in the build manifest. Everything the helper needs from the
    surrounding framework (roots, options, language, environment) comes from a `ViteHost`.

    Key features:
    - Development mode detection via environment variable or lock file
    - Lazily read, memoized build manifest
    - Debug-dependent error policy: raise when debug is on, return nothing when it is off
    - Preload helpers for page JSON and view modules

    Example:
    ```python
    from vite_assets import StaticHost, Vite

    vite = Vite(StaticHost(roots={"base": ".", "index": "public"}))
    vite.css()  # '<link href="/dist/assets/index.3fa1c2.css" rel="stylesheet">'
    vite.js()   # '<script src="/dist/assets/index.9be0d1.js" type="module"></script>'
    ```
    """

    def __init__(self, host: ViteHost):
        self.host = host
        self._manifest: Optional[Manifest] = None
        self._site: Optional[Dict[str, Any]] = None
        self._api_location: Optional[str] = None

    @property
    def debug(self) -> bool:
        return bool(self.host.option(OPTION_DEBUG, False))

    @property
    def out_dir(self) -> str:
        return str(self.host.option(OPTION_OUT_DIR, DEFAULT_OUT_DIR))

    @property
    def dev_server(self) -> str:
        return str(self.host.option(OPTION_DEV_SERVER, DEFAULT_DEV_SERVER))

    @property
    def default_entry(self) -> str:
        return str(self.host.option(OPTION_ENTRY, DEFAULT_ENTRY))

    @property
    def manifest_path(self) -> Path:
        return Path(self.host.root("index")) / self.out_dir / MANIFEST_FILENAME

    def is_dev(self) -> bool:
        """
        Checks for development mode, either by the `KIRBY_MODE` environment variable
        or by the presence of a `src/.lock` file under the base root.
        """
        if self.host.env(MODE_ENV_VAR) == DEVELOPMENT_MODE:
            return True
        return (Path(self.host.root("base")) / LOCK_FILE).is_file()

    def use_api_location(self) -> str:
        """Path of the content API, taken from `CONTENT_API_SLUG`. Empty when unset."""
        if self._api_location is None:
            self._api_location = url_path(self.host.env(API_SLUG_ENV_VAR), leading_slash=True)
        return self._api_location

    def use_site(self) -> Dict[str, Any]:
        """
        Site-wide data from `app-site.json` in the config root.

        Raises:
            SiteDataNotFoundError: the file is missing and debug is on.
        """
        if self._site is not None:
            return self._site

        site_file = Path(self.host.root("config")) / SITE_DATA_FILENAME
        if not site_file.is_file():
            if self.debug:
                raise SiteDataNotFoundError(site_file)
            return {}

        try:
            self._site = load_json_object(site_file)
        except ValueError as e:
            raise ViteError(f"Invalid site data at {site_file}: {e}") from e
        return self._site

    def use_manifest(self) -> Manifest:
        """
        Reads and parses the manifest file created by Vite.
        The parsed manifest is kept for the lifetime of this object. A missing
        manifest is not remembered, so a later build is picked up.

        Raises:
            ManifestNotFoundError: the manifest is missing and debug is on.
            InvalidManifestError: the manifest is not a JSON object.
        """
        if self._manifest is not None:
            return self._manifest

        manifest_file = self.manifest_path
        if not manifest_file.is_file():
            if self.debug:
                raise ManifestNotFoundError(manifest_file)
            logger.warning("Vite manifest not found at %s", manifest_file)
            return {}

        self._manifest = read_manifest(manifest_file)
        return self._manifest

    def clear_cache(self) -> None:
        """Forget the manifest, site data and API location read so far."""
        self._manifest = None
        self._site = None
        self._api_location = None
        logger.debug("Cleared Vite caches")

    def get_manifest_property(self, entry: str, key: str = "file") -> Any:
        """
        Gets a value of a manifest property for a specific entry.

        Returns:
            The value, or None when the entry or key is missing and debug is off.

        Raises:
            ManifestEntryError: the entry or key is missing and debug is on.
        """
        manifest_entry = self.use_manifest().get(entry)
        if not manifest_entry:
            if self.debug:
                raise ManifestEntryError(entry)
            return None

        value = manifest_entry.get(key)  # type: ignore[misc]
        if not value:
            if self.debug:
                raise ManifestEntryError(entry, key)
            return None

        return value

    def asset_dev(self, file: str) -> str:
        return f"{self.dev_server}/{file}"

    def asset_prod(self, file: str) -> str:
        return f"/{self.out_dir}/{file}"

    def css(self, entry: Optional[str] = None, options: Optional[Mapping[str, Any]] = None) -> Optional[Markup]:
        """
        Stylesheet links for an entry in production mode, one per CSS file of the entry.
        In development mode Vite injects styles itself, so nothing is returned.

        Args:
            entry (Optional[str]): Manifest entry, defaults to the `vite.entry` option.
            options (Optional[Mapping[str, Any]]): Extra attributes. `href` and `rel` can not be overridden.
        """
        if self.is_dev():
            return None

        files: Optional[List[str]] = self.get_manifest_property(entry or self.default_entry, "css")
        if not files:
            return None

        return Markup("").join(
            tag("link", "", {**(options or {}), "href": self.asset_prod(file), "rel": "stylesheet"}) for file in files
        )

    def js(self, entry: Optional[str] = None, options: Optional[Mapping[str, Any]] = None) -> Optional[Markup]:
        """
        Module script for an entry. In development mode it is preceded by Vite's client script.

        Args:
            entry (Optional[str]): Manifest entry, defaults to the `vite.entry` option.
            options (Optional[Mapping[str, Any]]): Extra attributes. `type` and `src` can not be overridden.
        """
        entry = entry or self.default_entry

        if self.is_dev():
            client = script(self.asset_dev(VITE_CLIENT), {"type": "module"})
            file = self.asset_dev(entry)
        else:
            client = Markup("")
            manifest_file = self.get_manifest_property(entry, "file")
            if not manifest_file:
                return None
            file = self.asset_prod(manifest_file)

        return client + script(file, {**(options or {}), "type": "module"})

    def preload_json(self, name: str) -> Markup:
        """
        Preloads the JSON-encoded page data for a given page.

        Args:
            name (str): Page id, e.g. `home` or `blog/first-post`.
        """
        base = f"/{self.host.language_code()}" if self.host.multilang() else ""

        return tag(
            "link",
            "",
            {
                "rel": "preload",
                "href": f"{base}{self.use_api_location()}/{name}.json",
                "as": "fetch",
                "type": "application/json",
                "crossorigin": "anonymous",
            },
        )

    def preload_module(self, name: str) -> Optional[Markup]:
        """
        Preloads the view module for a given page, e.g. `Home.e701bdef.js` for `home`.

        Args:
            name (str): Page template name or other module name.
        """
        if self.is_dev():
            return None

        chunk = find_chunk_by_suffix(self.use_manifest(), f"{ucfirst(name)}.vue")
        if not chunk or not chunk.get("file"):
            return None

        return tag("link", "", {"rel": "modulepreload", "href": self.asset_prod(chunk["file"])})

    def preload_imports(self, entry: Optional[str] = None) -> Optional[Markup]:
        """Module preload links for the chunks an entry imports, in production mode."""
        if self.is_dev():
            return None

        files = get_imported_files(self.use_manifest(), entry or self.default_entry)
        if not files:
            return None

        return Markup("").join(tag("link", "", {"rel": "modulepreload", "href": self.asset_prod(file)}) for file in files)

    def json(self, data: Any) -> str:
        """Converts data to a JSON string for embedding into a template."""
        return json_encode(data)


_instance: Optional[Vite] = None


def get_instance(host: Optional[ViteHost] = None) -> Vite:
    """
    Gets the process-wide helper via lazy initialization.
    The first call must pass the host; later calls return the same helper.
    """
    global _instance
    if _instance is None:
        if host is None:
            raise ViteError("No Vite host configured. Call get_instance(host) first.")
        _instance = Vite(host)
    return _instance


def reset_instance() -> None:
    global _instance
    _instance = None


def vite() -> Vite:
    return get_instance()
