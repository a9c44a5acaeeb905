"""Service holding submitted products in memory."""

from catalog_api.app.services.record_store import RecordStore


class ProductService(RecordStore):
    """Append‑only store of product records."""

    resource = "products"
