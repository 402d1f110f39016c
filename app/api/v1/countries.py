import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.v1.di import get_country_client, get_view_controller
from app.core.errors import (
    ApiError,
    CountryExplorerError,
    EmptyResultError,
    NetworkError,
    NotFoundError,
    ValidationError,
)
from app.schemas.country import CountryRecord
from app.schemas.view import RenderedView, SearchRequest
from app.services.country_service import CountryClient
from app.services.view_controller import ViewController

logger = logging.getLogger(__name__)

router = APIRouter()

_STATUS_FOR_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
    ApiError: 502,
    EmptyResultError: 502,
    NetworkError: 503,
}


@router.post("/search", response_model=RenderedView)
async def search(
    body: SearchRequest, controller: ViewController = Depends(get_view_controller)
):
    """Run a search and return what the page should now display.

    Failures are display states, so this always answers 200.
    """
    return await controller.submit(body.name)


@router.get("/view", response_model=RenderedView)
async def current_view(controller: ViewController = Depends(get_view_controller)):
    return controller.view


@router.get("/country", response_model=CountryRecord, response_model_by_alias=True)
async def get_country(
    name: str = Query(""), client: CountryClient = Depends(get_country_client)
):
    """Debug endpoint for quick testing."""
    try:
        query = name.strip()
        if not query:
            raise ValidationError()
        return await client.fetch_country(query)
    except CountryExplorerError as e:
        status = _STATUS_FOR_ERROR.get(type(e), 500)
        logger.info("[GET/COUNTRY] %s -> %d", name, status)
        raise HTTPException(status_code=status, detail=e.message)
