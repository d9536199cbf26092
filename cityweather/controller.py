# ABOUTME: Selection controller that owns the view state and sequences the two resolvers.
# ABOUTME: Uses a generation token so results from superseded selections never overwrite newer state.

import asyncio
import logging
from collections.abc import Callable

from cityweather.image_service import ImageResolver
from cityweather.models import SelectionState
from cityweather.weather_service import WeatherResolver

logger = logging.getLogger(__name__)

Listener = Callable[[SelectionState], None]


class SelectionController:
    """Drives one resolution cycle per city selection.

    A cycle resolves weather first and, only when that succeeds, the background
    image. Every cycle carries the generation token it was started under; a
    completion whose token is no longer current is dropped without touching
    state. Superseded cycles still run to completion.

    Previous weather and background stay in place while a new cycle loads.
    """

    def __init__(
        self,
        weather_resolver: WeatherResolver,
        image_resolver: ImageResolver,
        state: SelectionState | None = None,
    ):
        self._weather_resolver = weather_resolver
        self._image_resolver = image_resolver
        self._state = state if state is not None else SelectionState()
        self._generation = 0
        self._listeners: list[Listener] = []
        self._cycles: set[asyncio.Task] = set()

    @property
    def state(self) -> SelectionState:
        """A snapshot of the current state."""
        return self._state.model_copy(deep=True)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with a state snapshot after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select_city(self, city: str) -> asyncio.Task | None:
        """Start a resolution cycle for ``city``. Blank names are ignored and return None."""
        if not city or not city.strip():
            logger.debug("Ignoring empty city selection")
            return None
        return self._start_cycle(city)

    def refresh(self) -> asyncio.Task | None:
        """Re-run the cycle for the selected city, if there is one."""
        if self._state.selected_city is None:
            return None
        return self._start_cycle(self._state.selected_city)

    async def settle(self) -> None:
        """Wait until every in-flight cycle, stale or current, has finished."""
        while self._cycles:
            await asyncio.gather(*self._cycles)

    def _start_cycle(self, city: str) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        self._generation += 1
        token = self._generation

        self._state.selected_city = city
        self._state.loading = True
        self._notify()

        task = loop.create_task(self._run_cycle(city, token))
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)
        return task

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    async def _run_cycle(self, city: str, token: int) -> None:
        envelope = await self._weather_resolver.resolve(city)
        if not self._is_current(token):
            logger.debug("Discarding stale weather result for %r", city)
            return

        self._state.weather = envelope
        self._state.loading = False
        self._notify()

        if not envelope.success:
            return

        image = await self._image_resolver.resolve(city)
        if not self._is_current(token):
            logger.debug("Discarding stale background for %r", city)
            return

        self._state.background = image
        self._notify()

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener failed")
