"""Fake CatalogObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadingStartedEvent:
    path: str
    strict: bool


@dataclass(frozen=True)
class SampleLoadedEvent:
    sample_id: int


@dataclass(frozen=True)
class RecordSkippedEvent:
    index: int
    reason: str


@dataclass(frozen=True)
class LoadingCompletedEvent:
    path: str
    total_samples: int
    skipped_records: int


@dataclass(frozen=True)
class LoadingFailedEvent:
    path: str
    reason: str


class FakeCatalogObserver:
    def __init__(self) -> None:
        self.loading_started: list[LoadingStartedEvent] = []
        self.samples_loaded: list[SampleLoadedEvent] = []
        self.records_skipped: list[RecordSkippedEvent] = []
        self.loading_completed: list[LoadingCompletedEvent] = []
        self.loading_failed: list[LoadingFailedEvent] = []

    def catalog_loading_started(self, path: str, strict: bool) -> None:
        self.loading_started.append(LoadingStartedEvent(path=path, strict=strict))

    def catalog_sample_loaded(self, sample_id: int) -> None:
        self.samples_loaded.append(SampleLoadedEvent(sample_id=sample_id))

    def catalog_record_skipped(self, index: int, reason: str) -> None:
        self.records_skipped.append(RecordSkippedEvent(index=index, reason=reason))

    def catalog_loading_completed(
        self, path: str, total_samples: int, skipped_records: int
    ) -> None:
        self.loading_completed.append(
            LoadingCompletedEvent(
                path=path, total_samples=total_samples, skipped_records=skipped_records
            )
        )

    def catalog_loading_failed(self, path: str, reason: str) -> None:
        self.loading_failed.append(LoadingFailedEvent(path=path, reason=reason))
