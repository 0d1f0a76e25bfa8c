from pathlib import Path
from typing import Optional, Union


class ViteError(Exception):
    """
    Base exception for all vite_assets errors.
    """

    pass


class ManifestNotFoundError(ViteError):
    """
    Exception raised when the manifest file does not exist and debug is on.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__("manifest.json not found. Run `npm run build` first.")
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path


class InvalidManifestError(ViteError):
    """
    Exception raised when the manifest file is not a JSON object.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Invalid manifest at {path}: {reason}")
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path


class ManifestEntryError(ViteError):
    """
    Exception raised when an entry, or a key of an entry, is missing from the manifest.
    """

    def __init__(self, entry: str, key: Optional[str] = None):
        if key is None:
            message = f"{entry} is not a manifest entry"
        else:
            message = f"{key} not found in manifest entry {entry}"
        super().__init__(message)
        self._entry = entry
        self._key = key

    @property
    def entry(self) -> str:
        return self._entry

    @property
    def key(self) -> Optional[str]:
        return self._key


class SiteDataNotFoundError(ViteError):
    """
    Exception raised when the site data file does not exist and debug is on.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Site data not found at {path}")
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path
