"""Observer port for the catalog domain — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    def catalog_loading_started(self, path: str, strict: bool) -> None: ...

    def catalog_sample_loaded(self, sample_id: int) -> None: ...

    def catalog_record_skipped(self, index: int, reason: str) -> None: ...

    def catalog_loading_completed(
        self, path: str, total_samples: int, skipped_records: int
    ) -> None: ...

    def catalog_loading_failed(self, path: str, reason: str) -> None: ...
