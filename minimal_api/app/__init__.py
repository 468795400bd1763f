"""
Application package initializer.

``core`` holds configuration, logging, persistence wiring, the token
service and the route policy; ``models`` the ORM entities; ``schemas``
the API payloads; ``repositories`` storage access; ``services`` the
business rules; ``api`` the versioned routers.  ``main.create_app``
ties them together.
"""

from .main import create_app  # noqa: F401
