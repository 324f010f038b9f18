"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, path: str) -> None: ...

    def config_catalog_lenient(self, catalog_path: str) -> None: ...
