"""Catalog source configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CatalogConfig(BaseModel, frozen=True):
    """Where the sample catalog lives and how forgiving loading is.

    ``path`` may point at the asset file itself or at a directory holding a
    ``*.exolist.json`` asset. With ``strict`` unset, malformed records are
    skipped; with it set, any malformed record fails the whole load.
    """

    model_config = ConfigDict(extra="forbid")

    path: Path
    strict: bool = False
