from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the dish document store.

    ``BREEZ_CATALOG_PATH`` overrides the whole path.
    """

    data_dir: Path = _DEFAULT_DATA_DIR
    catalog_filename: str = "dishes.json"
    override_path: str = os.getenv("BREEZ_CATALOG_PATH", "")

    @property
    def catalog_path(self) -> Path:
        if self.override_path:
            return Path(self.override_path)
        return self.data_dir / self.catalog_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
