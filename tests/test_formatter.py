from app.schemas.country import Currency
from app.services.formatter import (
    build_map_url,
    extract_languages,
    format_currencies,
    format_number,
    to_country_view,
)

MAP = "https://maps.google.com/maps?q={lat},{lng}&z={zoom}&output=embed"


def test_format_number_groups_thousands():
    assert format_number(1234567) == "1,234,567"
    assert format_number(999) == "999"
    assert format_number(0) == "0"


def test_format_number_floats():
    assert format_number(551695.0) == "551,695"
    assert format_number(0.44) == "0.44"
    assert format_number(1234.56789) == "1,234.568"


def test_extract_languages():
    assert extract_languages({}) == ["Not available"]
    assert extract_languages(None) == ["Not available"]
    langs = extract_languages({"eng": "English", "fra": "French"})
    assert "English" in langs and "French" in langs
    assert len(langs) == 2


def test_format_currencies():
    assert format_currencies({"USD": {"name": "US Dollar", "symbol": "$"}}) == "US Dollar ($)"
    assert format_currencies({"USD": {"name": "US Dollar"}}) == "US Dollar"
    assert format_currencies(None) == "Not available"
    assert format_currencies({}) == "Not available"


def test_format_currencies_accepts_models_and_joins():
    currencies = {
        "CHF": Currency(name="Swiss franc", symbol="Fr."),
        "EUR": Currency(name="Euro", symbol="€"),
    }
    assert format_currencies(currencies) == "Swiss franc (Fr.), Euro (€)"


def test_build_map_url():
    assert build_map_url([46.0, 2.0], MAP, 5) == (
        "https://maps.google.com/maps?q=46.0,2.0&z=5&output=embed"
    )
    assert build_map_url([], MAP) is None


def test_country_view_maps_all_fields(france):
    view = to_country_view(france, MAP, 5)
    assert view.flag_url == "https://flagcdn.com/fr.svg"
    assert view.flag_alt == "Flag of France"
    assert view.common_name == "France"
    assert view.official_name == "French Republic"
    assert view.capital == "Paris"
    assert view.region == "Europe - Western Europe"
    assert view.population == "67,391,582"
    assert view.area == "551,695 km²"
    assert view.currencies == "Euro (€)"
    assert view.languages == ["French"]
    assert view.domains == [".fr"]
    assert view.map_url == "https://maps.google.com/maps?q=46.0,2.0&z=5&output=embed"
    assert view.timezones.startswith("UTC-10:00, UTC-09:30")
    assert view.continent == "Europe"
    assert view.calling_code == "+33"
    assert view.borders == "8 countries"
    assert view.independent == "Yes"
    assert view.un_member == "Yes"


def test_country_view_defaults_for_missing_fields(bouvet):
    view = to_country_view(bouvet, MAP, 5)
    assert view.flag_url == "https://flagcdn.com/w320/bv.png"
    assert view.capital == "Not available"
    assert view.region == "Antarctic"
    assert view.currencies == "Not available"
    assert view.languages == ["Not available"]
    assert view.domains == ["Not available"]
    assert view.continent == "Not available"
    assert view.calling_code == "Not available"
    assert view.borders == "None (island/isolated)"
    assert view.independent == "No"
    assert view.un_member == "No"
