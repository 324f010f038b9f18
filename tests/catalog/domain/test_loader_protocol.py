"""Tests verifying CatalogLoader protocol compliance of concrete implementations."""

import inspect
from pathlib import Path

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.catalog.domain.loader import CatalogLoader
from classical_quiz.catalog.infrastructure.json_loader import JsonCatalogLoader
from classical_quiz.config.domain.catalog import CatalogConfig
from tests.catalog.fake_observer import FakeCatalogObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


class TestJsonCatalogLoaderSatisfiesProtocol:
    def test_load_all_signature_matches_protocol(self) -> None:
        protocol_params = list(inspect.signature(CatalogLoader.load_all).parameters)
        impl_params = list(inspect.signature(JsonCatalogLoader.load_all).parameters)

        assert impl_params == protocol_params

    def test_usable_through_protocol_type(self) -> None:
        loader: CatalogLoader = JsonCatalogLoader(observer=FakeCatalogObserver())
        catalog = loader.load_all(
            config=CatalogConfig(path=FIXTURES / "simple_catalog.exolist.json")
        )

        assert isinstance(catalog, Catalog)
        assert len(catalog) == 4
