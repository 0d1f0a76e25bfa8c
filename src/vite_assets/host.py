import os
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class ViteHost(ABC):
    """
    The host framework the Vite helper runs inside.
    This class should be implemented by the CMS or web framework you want to integrate with.

    Roots used by the helper:
    - `base`: project root, holding the `src/.lock` file while the dev server runs
    - `index`: public web root, holding the build output directory
    - `config`: configuration directory, holding `app-site.json`
    """

    @abstractmethod
    def root(self, name: str) -> str:
        pass

    @abstractmethod
    def option(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def multilang(self) -> bool:
        pass

    @abstractmethod
    def language_code(self) -> Optional[str]:
        pass

    def env(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class StaticHost(ViteHost):
    """
    A host backed by plain mappings, for using the helper outside of a CMS.
    Example:
    ```python
    host = StaticHost(
        roots={"base": "/srv/app", "index": "/srv/app/public"},
        options={"vite.outDir": "build", "debug": True},
    )
    vite = Vite(host)
    ```
    """

    def __init__(
        self,
        roots: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
        language_code: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.roots = dict(roots or {})
        self.options = dict(options or {})
        self._language_code = language_code
        self.environ = environ

    def root(self, name: str) -> str:
        try:
            return self.roots[name]
        except KeyError:
            # every root falls back to the base root, then to the working directory
            return self.roots.get("base", os.getcwd())

    def option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def multilang(self) -> bool:
        return self._language_code is not None

    def language_code(self) -> Optional[str]:
        return self._language_code

    def env(self, name: str) -> Optional[str]:
        if self.environ is None:
            return super().env(name)
        return self.environ.get(name)
