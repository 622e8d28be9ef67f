"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box against ``products.json`` in the project root
on port 3002.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product API")
    description: str = os.getenv("API_DESCRIPTION", "API for managing products.")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))

    # Path of the JSON document holding the catalog.  Relative paths are
    # resolved against the project root by the ``store`` module.
    products_file: str = os.getenv("PRODUCTS_FILE", "products.json")

    # Swagger UI location.  The generated schema itself stays at
    # ``/openapi.json``.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    # Prefix for the versioned router.  Empty by default so that the
    # catalog is reachable at ``/products``; set to e.g. ``/api/v1`` to
    # nest it.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # When enabled, PATCH only merges the known product fields and drops
    # any other keys from the payload.
    patch_known_fields_only: bool = _env_flag("PATCH_KNOWN_FIELDS_ONLY")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
