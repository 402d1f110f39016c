from functools import lru_cache

from app.core.config import settings
from app.services.country_service import CountryClient
from app.services.theme_store import ThemeStore
from app.services.view_controller import ViewController

# One display and one theme for the whole process; tests swap these out
# through app.dependency_overrides.


@lru_cache(maxsize=1)
def get_country_client() -> CountryClient:
    return CountryClient(timeout=settings.HTTP_TIMEOUT)


@lru_cache(maxsize=1)
def get_view_controller() -> ViewController:
    return ViewController(get_country_client())


@lru_cache(maxsize=1)
def get_theme_store() -> ThemeStore:
    return ThemeStore(settings.THEME_STORE_PATH)
