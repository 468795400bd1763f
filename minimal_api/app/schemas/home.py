from pydantic import BaseModel


class Home(BaseModel):
    """Body of the anonymous landing route."""

    message: str = "Welcome to the vehicles API - Minimal API"
    doc: str = "/docs"
