import logging
from typing import Optional, Protocol

from app.core.config import settings
from app.core.errors import CountryExplorerError, ValidationError
from app.schemas.country import CountryRecord
from app.schemas.view import RenderedView, ViewSnapshot, ViewState
from app.services.formatter import to_country_view

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "Something went wrong while looking up that country. Please try again."


class CountryLookup(Protocol):
    async def fetch_country(self, name: str) -> CountryRecord: ...


def render(
    snapshot: ViewSnapshot,
    map_template: Optional[str] = None,
    map_zoom: Optional[int] = None,
) -> RenderedView:
    """Describe what the page should display for ``snapshot``.

    Exactly one panel is visible for loading/results/error and none while
    idle.
    """
    state = snapshot.state
    view = RenderedView(state=state, generation=snapshot.generation)

    if state is ViewState.LOADING:
        view.loading_visible = True
    elif state is ViewState.RESULTS and snapshot.record is not None:
        view.results_visible = True
        view.scroll_to_results = True
        view.country = to_country_view(
            snapshot.record,
            map_template or settings.MAP_EMBED_URL,
            settings.MAP_ZOOM if map_zoom is None else map_zoom,
        )
    elif state is ViewState.ERROR:
        view.error_visible = True
        view.error_message = snapshot.message
    return view


class ViewController:
    """Owns the display state and drives search -> format -> display.

    Each ``submit`` takes a new generation number. A lookup that completes
    after a newer ``submit`` started is discarded, so the display always
    reflects the latest search.
    """

    def __init__(
        self,
        client: CountryLookup,
        map_template: Optional[str] = None,
        map_zoom: Optional[int] = None,
    ):
        self.client = client
        self.map_template = map_template or settings.MAP_EMBED_URL
        self.map_zoom = settings.MAP_ZOOM if map_zoom is None else map_zoom
        self._generation = 0
        self._snapshot = ViewSnapshot()

    @property
    def snapshot(self) -> ViewSnapshot:
        return self._snapshot

    @property
    def view(self) -> RenderedView:
        return render(self._snapshot, self.map_template, self.map_zoom)

    def _commit(
        self,
        generation: int,
        state: ViewState,
        record: Optional[CountryRecord] = None,
        message: Optional[str] = None,
    ) -> bool:
        if generation != self._generation:
            logger.debug(
                "Dropping stale %s for generation %d (latest %d)",
                state.value,
                generation,
                self._generation,
            )
            return False
        self._snapshot = ViewSnapshot(
            state=state, generation=generation, record=record, message=message
        )
        return True

    async def submit(self, name: Optional[str]) -> RenderedView:
        self._generation += 1
        generation = self._generation

        query = (name or "").strip()
        if not query:
            self._commit(generation, ViewState.ERROR, message=ValidationError().message)
            return self.view

        self._commit(generation, ViewState.LOADING)
        try:
            record = await self.client.fetch_country(query)
        except CountryExplorerError as e:
            logger.warning("Search for %r failed: %s", query, e.message)
            self._commit(generation, ViewState.ERROR, message=e.message)
        except Exception:
            logger.exception("Unexpected failure searching for %r", query)
            self._commit(generation, ViewState.ERROR, message=UNEXPECTED_ERROR)
        else:
            logger.info("Displaying country info for: %s", record.name.common)
            self._commit(generation, ViewState.RESULTS, record=record)
        return self.view
