"""Display formatting for country records. Pure functions only."""

from typing import Any, List, Mapping, Optional, Sequence, Union

from app.schemas.country import CountryRecord, Currency
from app.schemas.view import CountryView

NOT_AVAILABLE = "Not available"
NO_BORDERS = "None (island/isolated)"


def format_number(n: Union[int, float]) -> str:
    """Group digits the en-US way, keeping at most 3 fraction digits."""
    if isinstance(n, float) and not n.is_integer():
        return f"{n:,.3f}".rstrip("0").rstrip(".")
    return f"{int(n):,}"


def extract_languages(lang_map: Optional[Mapping[str, str]]) -> List[str]:
    if not lang_map:
        return [NOT_AVAILABLE]
    return list(lang_map.values())


def _currency_label(code: str, currency: Union[Currency, Mapping[str, Any]]) -> str:
    if isinstance(currency, Mapping):
        name, symbol = currency.get("name"), currency.get("symbol")
    else:
        name, symbol = currency.name, currency.symbol
    name = name or code
    return f"{name} ({symbol})" if symbol else name


def format_currencies(curr_map: Optional[Mapping[str, Any]]) -> str:
    if not curr_map:
        return NOT_AVAILABLE
    return ", ".join(_currency_label(code, c) for code, c in curr_map.items())


def build_map_url(
    latlng: Sequence[float], template: str, zoom: int = 5
) -> Optional[str]:
    if len(latlng) < 2:
        return None
    return template.format(lat=latlng[0], lng=latlng[1], zoom=zoom)


def _calling_code(record: CountryRecord) -> str:
    if not record.idd.root:
        return NOT_AVAILABLE
    suffix = record.idd.suffixes[0] if record.idd.suffixes else ""
    return f"{record.idd.root}{suffix}"


def _yes_no(flag: Optional[bool]) -> str:
    return "Yes" if flag else "No"


def to_country_view(record: CountryRecord, map_template: str, zoom: int = 5) -> CountryView:
    """Map a record onto its display fields, applying defaults for gaps."""
    region = record.region
    if record.subregion:
        region = f"{region} - {record.subregion}"

    return CountryView(
        flag_url=record.flags.svg or record.flags.png,
        flag_alt=f"Flag of {record.name.common}",
        common_name=record.name.common,
        official_name=record.name.official,
        capital=record.capital[0] if record.capital else NOT_AVAILABLE,
        region=region,
        population=format_number(record.population),
        area=f"{format_number(record.area)} km²",
        currencies=format_currencies(record.currencies),
        languages=extract_languages(record.languages),
        domains=list(record.tld) if record.tld else [NOT_AVAILABLE],
        map_url=build_map_url(record.latlng, map_template, zoom),
        timezones=", ".join(record.timezones),
        continent=record.continents[0] if record.continents else NOT_AVAILABLE,
        calling_code=_calling_code(record),
        borders=f"{len(record.borders)} countries" if record.borders else NO_BORDERS,
        independent=_yes_no(record.independent),
        un_member=_yes_no(record.un_member),
    )
