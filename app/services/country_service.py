import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError as SchemaError

from app.core.config import settings
from app.core.errors import ApiError, EmptyResultError, NetworkError, NotFoundError
from app.schemas.country import CountryRecord

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone
URI_SAFE = "!~*'()"


def lookup_url(base_url: str, name: str) -> str:
    return f"{base_url.rstrip('/')}/name/{quote(name, safe=URI_SAFE)}"


def _printable(name: str) -> str:
    # Lone surrogates can't be sent or shown; they become "?"
    return name.encode("utf-8", "replace").decode("utf-8")


class CountryClient:
    """Issues one name lookup per call against REST Countries.

    Every failure is raised as a ``CountryExplorerError`` subclass; nothing
    is retried or cached.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.RESTCOUNTRIES_BASE_URL
        self.timeout = timeout
        self.transport = transport

    async def fetch_country(self, name: str) -> CountryRecord:
        name = _printable(name)
        url = lookup_url(self.base_url, name)
        logger.info("Fetching from API: %s", url)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                r = await client.get(url)
            except httpx.RequestError as e:
                logger.warning("Request failure for %r: %s", name, e)
                raise NetworkError(str(e)) from e

        logger.info("Response status: %s", r.status_code)
        if r.status_code == 404:
            raise NotFoundError(name)
        if not r.is_success:
            raise ApiError(r.status_code, r.reason_phrase)

        try:
            data = r.json()
        except ValueError as e:
            raise ApiError(r.status_code, "Malformed response body") from e
        if not isinstance(data, list):
            raise ApiError(r.status_code, "Malformed response body")
        if not data:
            raise EmptyResultError()

        # The API orders matches by relevance; the first one wins
        try:
            return CountryRecord.model_validate(data[0])
        except SchemaError as e:
            logger.warning("Unexpected country payload for %r: %s", name, e)
            raise ApiError(r.status_code, "Malformed response body") from e
