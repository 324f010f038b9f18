"""CatalogLoader Protocol — structural interface for loading the sample catalog."""

from typing import Protocol

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.config.domain.catalog import CatalogConfig


class CatalogLoader(Protocol):
    """Loads the full Catalog from the asset described by CatalogConfig."""

    def load_all(self, config: CatalogConfig) -> Catalog: ...
