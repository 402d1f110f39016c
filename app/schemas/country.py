from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict


class _Snapshot(BaseModel):
    # Read-only view of one API response; fields we don't display are ignored
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class CountryName(_Snapshot):
    common: str
    official: str


class Currency(_Snapshot):
    name: Optional[str] = None
    symbol: Optional[str] = None


class DialingCode(_Snapshot):
    root: Optional[str] = None
    suffixes: Optional[List[str]] = None


class Flags(_Snapshot):
    svg: Optional[str] = None
    png: Optional[str] = None
    alt: Optional[str] = None


class CountryRecord(_Snapshot):
    """One country as returned by ``/v3.1/name/{name}``."""

    name: CountryName
    capital: Optional[List[str]] = None
    region: str = ""
    subregion: Optional[str] = None
    population: int = 0
    area: float = 0.0
    currencies: Optional[Dict[str, Currency]] = None
    languages: Optional[Dict[str, str]] = None
    tld: Optional[List[str]] = None
    latlng: List[float] = []
    timezones: List[str] = []
    continents: Optional[List[str]] = None
    idd: DialingCode = DialingCode()
    borders: Optional[List[str]] = None
    independent: Optional[bool] = None
    un_member: bool = Field(default=False, alias="unMember")
    flags: Flags = Flags()
