from fastapi import APIRouter

from minimal_api.app.schemas.home import Home

router = APIRouter()


@router.get("/", response_model=Home)
def home() -> Home:
    """Landing route, open to anonymous callers."""
    return Home()
