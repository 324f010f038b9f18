"""Catalog aggregate — the ordered, read-only set of samples for one app launch."""

from pydantic import BaseModel, Field, model_validator

from classical_quiz.catalog.domain.errors import SampleNotFoundError
from classical_quiz.catalog.domain.sample import Sample, SampleId


class Catalog(BaseModel, frozen=True):
    """Immutable, ordered sequence of samples, unique by id.

    Loaded once by a CatalogLoader and never mutated afterwards.
    """

    samples: tuple[Sample, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Catalog":
        seen: set[SampleId] = set()
        duplicates: list[SampleId] = []
        for sample in self.samples:
            if sample.id in seen:
                duplicates.append(sample.id)
            seen.add(sample.id)
        if duplicates:
            ids = ", ".join(str(i) for i in duplicates)
            raise ValueError(f"duplicate sample id(s): {ids}")
        return self

    def __len__(self) -> int:
        return len(self.samples)

    def __contains__(self, sample_id: object) -> bool:
        return any(sample.id == sample_id for sample in self.samples)

    @property
    def sample_ids(self) -> frozenset[SampleId]:
        return frozenset(sample.id for sample in self.samples)

    @property
    def max_score(self) -> int:
        """Most rounds a single game can have: every sample but the last one left."""
        return max(len(self.samples) - 1, 0)

    def lookup(self, sample_id: SampleId) -> Sample:
        """
        Return the sample with the given id.

        Raises:
            SampleNotFoundError: if no sample carries that id.
        """
        for sample in self.samples:
            if sample.id == sample_id:
                return sample
        raise SampleNotFoundError(sample_id=sample_id)

    def art_reference_for(self, sample_id: SampleId) -> str:
        return self.lookup(sample_id).art_reference
