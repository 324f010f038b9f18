"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, path: str) -> None:
        self._log.info("config.loaded", name=name, path=path)

    def config_catalog_lenient(self, catalog_path: str) -> None:
        self._log.info(
            "config.catalog_lenient",
            catalog_path=catalog_path,
            message="Malformed catalog records will be skipped, not rejected",
        )
