"""
JSON document storage for the product catalog.

The whole catalog lives in a single JSON document of the form
``{"products": [...]}``.  There is no cache: every call to
``ProductStore.load`` re-reads the file and every ``save`` rewrites it
completely.  ``transaction`` wraps a load‑mutate‑save cycle in a
process‑wide lock so that concurrent requests served by one process
do not overwrite each other's changes.  Separate processes sharing the
same file are not coordinated; the last writer wins.

``get_store`` builds a store for the configured path and ``init_store``
creates an empty document on startup if none exists yet.
"""

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .config import settings
from .exceptions import StorageError


logger = logging.getLogger(__name__)

# Shared by every store instance; mutations of different files are rare
# enough that one lock is sufficient.
_write_lock = threading.Lock()


class ProductStore:
    """Read and write the products document at ``path``."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        """Read the document and return its ``products`` list.

        Raises ``StorageError`` if the file is missing, cannot be read,
        is not valid JSON or does not contain a ``products`` array.
        """
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as e:
            raise StorageError(f"Products file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Products file is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read products file: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("products"), list):
            raise StorageError("Products file must contain an object with a 'products' array")
        return document["products"]

    def save(self, products: List[Dict[str, Any]]) -> None:
        """Overwrite the document with ``{"products": products}``.

        The file is written in place with two‑space indentation.
        Raises ``StorageError`` if the data cannot be serialized or the
        file cannot be written.
        """
        try:
            payload = json.dumps({"products": products}, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize products: {e}") from e
        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise StorageError(f"Cannot write products file: {e}") from e
        logger.debug("Saved %d products to %s", len(products), self.path)

    @contextmanager
    def transaction(self) -> Iterator[List[Dict[str, Any]]]:
        """Yield the loaded collection and save it when the block exits cleanly.

        If the block raises, nothing is written and the exception
        propagates.
        """
        with _write_lock:
            products = self.load()
            yield products
            self.save(products)


def get_products_path() -> str:
    """Compute the path to the products document.

    If ``settings.products_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    products_file = settings.products_file
    if os.path.isabs(products_file):
        return products_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / products_file).resolve())


def get_store() -> ProductStore:
    """Return a store bound to the currently configured path."""
    return ProductStore(get_products_path())


def init_store() -> None:
    """Create an empty products document if the configured file is missing."""
    store = get_store()
    if store.path.exists():
        logger.info("Using products file %s", store.path)
        return
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.save([])
    logger.info("Created empty products file %s", store.path)
