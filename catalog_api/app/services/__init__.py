"""
Service layer abstraction.

Each service holds the records of one resource.  By isolating the
storage here the API handlers stay unaware of how records are kept,
so the in‑memory lists could later be replaced by a database without
touching the routers.
"""
