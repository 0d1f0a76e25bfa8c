from typing import Dict, List, TypedDict

OPTION_OUT_DIR = "vite.outDir"
OPTION_DEV_SERVER = "vite.devServer"
OPTION_ENTRY = "vite.entry"
OPTION_DEBUG = "debug"

DEFAULT_OUT_DIR = "dist"
DEFAULT_DEV_SERVER = "http://localhost:3000"
DEFAULT_ENTRY = "index.js"

MODE_ENV_VAR = "KIRBY_MODE"
DEVELOPMENT_MODE = "development"
API_SLUG_ENV_VAR = "CONTENT_API_SLUG"

MANIFEST_FILENAME = "manifest.json"
SITE_DATA_FILENAME = "app-site.json"
LOCK_FILE = "src/.lock"
VITE_CLIENT = "@vite/client"


class ManifestChunk(TypedDict, total=False):
    file: str
    src: str
    css: List[str]
    imports: List[str]
    dynamicImports: List[str]
    assets: List[str]
    isEntry: bool
    isDynamicEntry: bool


Manifest = Dict[str, ManifestChunk]
