"""Structlog implementation of the CatalogObserver port."""

import structlog


class StructlogCatalogObserver:
    """Delegates catalog domain events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_loading_started(self, path: str, strict: bool) -> None:
        self._log.info("catalog.loading_started", path=path, strict=strict)

    def catalog_sample_loaded(self, sample_id: int) -> None:
        self._log.debug("catalog.sample_loaded", sample_id=sample_id)

    def catalog_record_skipped(self, index: int, reason: str) -> None:
        self._log.warning("catalog.record_skipped", index=index, reason=reason)

    def catalog_loading_completed(
        self, path: str, total_samples: int, skipped_records: int
    ) -> None:
        self._log.info(
            "catalog.loading_completed",
            path=path,
            total_samples=total_samples,
            skipped_records=skipped_records,
        )

    def catalog_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("catalog.loading_failed", path=path, reason=reason)
