"""
Service layer for users.

Users are kept exactly like products: each submitted object is stored
as is, in order, until the process exits.  There is no registration,
login or lookup by identifier.
"""

from catalog_api.app.services.record_store import RecordStore


class UserService(RecordStore):
    """Append‑only store of user records."""

    resource = "users"
