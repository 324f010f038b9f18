"""JSON catalog loader — reads an exolist asset and returns a Catalog of Samples."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.catalog.domain.observer import CatalogObserver
from classical_quiz.catalog.domain.sample import Sample, SampleId
from classical_quiz.catalog.infrastructure.errors import CatalogLoadError
from classical_quiz.config.domain.catalog import CatalogConfig

ASSET_SUFFIX = ".exolist.json"

# Asset record key -> Sample field.
_FIELD_MAP: dict[str, str] = {
    "id": "id",
    "composer": "composer",
    "name": "title",
    "uri": "audio_reference",
    "albumArtID": "art_reference",
}


class JsonCatalogLoader:
    """Loads the sample catalog from a JSON array of asset records."""

    def __init__(self, observer: CatalogObserver) -> None:
        self._observer = observer

    def load_all(self, config: CatalogConfig) -> Catalog:
        """
        Load every sample from the asset described by config.

        In lenient mode malformed or duplicate records are skipped and reported
        to the observer. In strict mode all record problems are collected and
        raised together.

        Raises:
            CatalogLoadError: if the asset is missing, is not valid JSON, is not a
                JSON array, or (strict mode only) contains any bad record.
        """
        path_str = str(config.path)
        self._observer.catalog_loading_started(path=path_str, strict=config.strict)

        try:
            asset_path = resolve_asset_path(path=config.path)
            records = _read_records(path=asset_path)
        except CatalogLoadError as exc:
            self._observer.catalog_loading_failed(path=path_str, reason=exc.reason)
            raise

        samples, errors = self._parse_records(records=records, strict=config.strict)

        if errors and config.strict:
            reason = "; ".join(errors)
            self._observer.catalog_loading_failed(path=path_str, reason=reason)
            raise CatalogLoadError(reason=reason)

        self._observer.catalog_loading_completed(
            path=path_str,
            total_samples=len(samples),
            skipped_records=len(errors),
        )
        return Catalog(samples=tuple(samples))

    def _parse_records(
        self, records: list[Any], strict: bool
    ) -> tuple[list[Sample], list[str]]:
        """Parse each record, collecting problems without aborting early."""
        samples: list[Sample] = []
        errors: list[str] = []
        seen: set[SampleId] = set()

        for index, record in enumerate(records):
            result = _parse_record(record=record, index=index)
            if isinstance(result, Sample) and result.id in seen:
                result = f"record {index}: duplicate id {result.id}"

            if isinstance(result, str):
                errors.append(result)
                if not strict:
                    self._observer.catalog_record_skipped(index=index, reason=result)
                continue

            seen.add(result.id)
            samples.append(result)
            self._observer.catalog_sample_loaded(sample_id=result.id)

        return samples, errors


def resolve_asset_path(path: Path) -> Path:
    """
    Return the catalog file for path.

    A directory is searched for a file ending in ``.exolist.json``; when several
    match, the last one in sorted order is used.
    """
    if path.is_dir():
        candidates = sorted(p for p in path.iterdir() if p.name.endswith(ASSET_SUFFIX))
        if not candidates:
            raise CatalogLoadError(reason=f"no {ASSET_SUFFIX} asset in: {path}")
        return candidates[-1]
    if not path.exists():
        raise CatalogLoadError(reason=f"file not found: {path}")
    return path


def _read_records(path: Path) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(reason=f"invalid JSON in {path}: {exc}") from exc
    except OSError as exc:
        raise CatalogLoadError(reason=f"cannot read {path}: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogLoadError(reason=f"expected a JSON array of samples in {path}")
    return data


def _parse_record(record: Any, index: int) -> Sample | str:
    """
    Parse a single asset record into a Sample.

    Returns a Sample on success, or an error string describing the problem.
    """
    if not isinstance(record, dict):
        return f"record {index}: expected an object"

    missing = [key for key in ("id", "composer", "uri") if key not in record]
    if missing:
        keys = ", ".join(f"'{k}'" for k in missing)
        return f"record {index}: missing key(s) {keys}"

    # bool is an int subclass; "id": true is not a valid sample id.
    if isinstance(record["id"], bool) or not isinstance(record["id"], int):
        return f"record {index}: 'id' must be an integer"

    fields = {
        field: record.get(key, "") for key, field in _FIELD_MAP.items()
    }
    try:
        return Sample.model_validate(fields)
    except ValidationError as exc:
        problems = ", ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return f"record {index}: {problems}"
