from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

from pydantic import ValidationError

from ..recommendations.models import CatalogRecord
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)


class CatalogUnavailableError(RuntimeError):
    """The catalog could not be read."""


class CatalogStore(Protocol):
    def fetch_all(self) -> list[CatalogRecord]: ...


class InMemoryCatalogStore:
    def __init__(self, records: Sequence[CatalogRecord]) -> None:
        self._records = list(records)

    def fetch_all(self) -> list[CatalogRecord]:
        return list(self._records)


class JsonCatalogStore:
    """
    Dish documents kept in one JSON file as ``{document_id: document}``.

    Every read goes back to the file; no filtering happens here.
    """

    def __init__(self, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> None:
        self._config = config

    @property
    def path(self) -> Path:
        return self._config.catalog_path

    def fetch_documents(self) -> dict[str, dict[str, Any]]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogUnavailableError(f"Cannot read catalog at {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise CatalogUnavailableError(f"Catalog at {self.path} is not a document mapping")
        return raw

    def fetch_all(self) -> list[CatalogRecord]:
        records: list[CatalogRecord] = []
        for doc_id, document in self.fetch_documents().items():
            try:
                records.append(CatalogRecord.model_validate(document))
            except ValidationError as exc:
                raise CatalogUnavailableError(f"Invalid catalog document {doc_id}: {exc}") from exc
        logger.debug("Loaded %d catalog records from %s", len(records), self.path)
        return records

    def write_all(self, documents: Mapping[str, Mapping[str, Any]]) -> Path:
        """Replace the stored documents."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(dict(documents), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return self.path


_default_store: JsonCatalogStore | None = None


def get_catalog_store() -> CatalogStore:
    """Return the process-wide catalog store."""
    global _default_store
    if _default_store is None:
        _default_store = JsonCatalogStore()
    return _default_store
