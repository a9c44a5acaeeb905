"""
Version 1 of the API.

This subpackage bundles the products and users endpoints.  Breaking
changes should be introduced in a new version subpackage (e.g. ``v2``)
to preserve backwards compatibility.
"""
