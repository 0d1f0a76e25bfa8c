import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .domain import Manifest, ManifestChunk
from .exceptions import InvalidManifestError

logger = logging.getLogger(__name__)


def load_json_object(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON file whose top level must be an object.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: the file is not valid JSON, or its top level is not an object.
    """
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def read_manifest(path: Union[str, Path]) -> Manifest:
    try:
        manifest = load_json_object(path)
    except ValueError as e:
        raise InvalidManifestError(path, str(e)) from e
    logger.debug("Loaded %d manifest entries from %s", len(manifest), path)
    return manifest  # type: ignore[return-value]


def find_chunk_by_suffix(manifest: Manifest, suffix: str) -> Optional[ManifestChunk]:
    """Return the first chunk whose entry name ends with `suffix`, in manifest order."""
    for name, chunk in manifest.items():
        if name.endswith(suffix):
            return chunk
    return None


def get_imported_files(manifest: Manifest, entry: str) -> List[str]:
    """
    Output files of the chunks statically imported by `entry`.
    Imports that are not themselves in the manifest, or have no file, are skipped.
    """
    files = []
    for name in manifest.get(entry, {}).get("imports", []):
        chunk = manifest.get(name)
        if chunk and chunk.get("file"):
            files.append(chunk["file"])
    return files
