"""
Application package initializer.

This package contains the application factory and its submodules.
Each resource (products, users) has a service holding its records
in memory and a router defined in ``api/v1/endpoints``.  Routers are
grouped under ``api/<version>/`` so further versions can be added
next to ``v1`` later.
"""

from .main import app, create_app  # noqa: F401
