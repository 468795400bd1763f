"""
API package containing versioned routes.

Version subpackages (currently ``v1``) expose a top-level ``router``
that includes all of their domain routers.  ``deps`` holds the
dependencies shared by every version.
"""
