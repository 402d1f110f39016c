from typing import Optional

from fastapi import APIRouter, Depends, Header

from app.api.v1.di import get_theme_store
from app.core.config import settings
from app.schemas.view import Theme, ThemeRequest, ThemeView
from app.services.theme_store import ThemeStore

router = APIRouter()


def color_scheme_hint(
    prefers_color_scheme: Optional[str] = Header(
        None, alias="Sec-CH-Prefers-Color-Scheme"
    ),
) -> Optional[str]:
    return prefers_color_scheme or settings.DEFAULT_COLOR_SCHEME


def _theme_view(theme: Theme) -> ThemeView:
    return ThemeView(theme=theme, icon="moon" if theme is Theme.DARK else "sun")


@router.get("/theme", response_model=ThemeView)
async def get_theme(
    hint: Optional[str] = Depends(color_scheme_hint),
    store: ThemeStore = Depends(get_theme_store),
):
    return _theme_view(store.initialize(hint))


@router.put("/theme", response_model=ThemeView)
async def set_theme(body: ThemeRequest, store: ThemeStore = Depends(get_theme_store)):
    return _theme_view(store.apply_theme(body.theme))


@router.post("/theme/toggle", response_model=ThemeView)
async def toggle_theme(
    hint: Optional[str] = Depends(color_scheme_hint),
    store: ThemeStore = Depends(get_theme_store),
):
    return _theme_view(store.toggle_theme(hint))
