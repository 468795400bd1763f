"""
Top-level package for the Minimal API.

A small HTTP API exposing CRUD endpoints for administrators and
vehicles behind bearer token authentication and role-based
authorization.  All functionality lives in submodules under ``app``.
"""

__version__ = "1.0.0"
