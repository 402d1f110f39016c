import asyncio
import copy

import httpx
import pytest

from app.core.errors import NotFoundError
from app.schemas.country import CountryRecord

FRANCE = {
    "name": {
        "common": "France",
        "official": "French Republic",
        "nativeName": {"fra": {"official": "République française", "common": "France"}},
    },
    "tld": [".fr"],
    "cca2": "FR",
    "independent": True,
    "unMember": True,
    "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
    "idd": {"root": "+3", "suffixes": ["3"]},
    "capital": ["Paris"],
    "region": "Europe",
    "subregion": "Western Europe",
    "languages": {"fra": "French"},
    "latlng": [46.0, 2.0],
    "borders": ["AND", "BEL", "DEU", "ITA", "LUX", "MCO", "ESP", "CHE"],
    "area": 551695.0,
    "population": 67391582,
    "timezones": [
        "UTC-10:00",
        "UTC-09:30",
        "UTC-09:00",
        "UTC-08:00",
        "UTC-04:00",
        "UTC-03:00",
        "UTC+01:00",
        "UTC+02:00",
        "UTC+03:00",
        "UTC+04:00",
        "UTC+05:00",
        "UTC+10:00",
        "UTC+11:00",
        "UTC+12:00",
    ],
    "continents": ["Europe"],
    "flags": {
        "png": "https://flagcdn.com/w320/fr.png",
        "svg": "https://flagcdn.com/fr.svg",
        "alt": "The flag of France is composed of three equal vertical bands.",
    },
}

# Sparse record: no capital, currencies, languages, tld, borders, continents or idd root
BOUVET = {
    "name": {"common": "Bouvet Island", "official": "Bouvet Island"},
    "independent": False,
    "unMember": False,
    "idd": {},
    "region": "Antarctic",
    "latlng": [-54.4333, 3.4],
    "area": 49.0,
    "population": 0,
    "timezones": ["UTC+01:00"],
    "flags": {"png": "https://flagcdn.com/w320/bv.png"},
}


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def france_payload():
    return copy.deepcopy(FRANCE)


@pytest.fixture
def france():
    return CountryRecord.model_validate(FRANCE)


@pytest.fixture
def bouvet():
    return CountryRecord.model_validate(BOUVET)


class FakeCountryClient:
    """Resolves lookups from a dict; unknown names 404 like the real API."""

    def __init__(self, countries=None):
        self.countries = countries or {}
        self.calls = []

    async def fetch_country(self, name: str) -> CountryRecord:
        self.calls.append(name)
        payload = self.countries.get(name.lower())
        if payload is None:
            raise NotFoundError(name)
        return CountryRecord.model_validate(payload)


@pytest.fixture
def fake_client():
    return FakeCountryClient({"france": FRANCE, "bouvet island": BOUVET})


def json_transport(status_code=200, payload=None, requests=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)
