from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Optional, List

from app.schemas.country import CountryRecord


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    ERROR = "error"


class ViewSnapshot(BaseModel):
    """Everything the display depends on. Replaced whole, never mutated."""

    model_config = ConfigDict(frozen=True)

    state: ViewState = ViewState.IDLE
    generation: int = 0
    record: Optional[CountryRecord] = None
    message: Optional[str] = None


class CountryView(BaseModel):
    flag_url: Optional[str] = None
    flag_alt: str
    common_name: str
    official_name: str
    capital: str
    region: str
    population: str
    area: str
    currencies: str
    languages: List[str]
    domains: List[str]
    map_url: Optional[str] = None
    timezones: str
    continent: str
    calling_code: str
    borders: str
    independent: str
    un_member: str


class RenderedView(BaseModel):
    state: ViewState
    generation: int
    loading_visible: bool = False
    results_visible: bool = False
    error_visible: bool = False
    error_message: Optional[str] = None
    country: Optional[CountryView] = None
    scroll_to_results: bool = False


class ThemeView(BaseModel):
    theme: Theme
    icon: str


class SearchRequest(BaseModel):
    name: str = ""


class ThemeRequest(BaseModel):
    theme: Theme
