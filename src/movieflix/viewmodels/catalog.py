"""Catalog aggregator: the popular listing and search result state machines."""

import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from functools import partial
from typing import NamedTuple

from movieflix.schemas.movie import Movie, MoviePage
from movieflix.services.base import FetchError
from movieflix.services.catalog import BaseMovieService

logger = logging.getLogger(__name__)


class Listing(StrEnum):
    POPULAR = "popular"
    SEARCH = "search"


class ChangeReason(StrEnum):
    LOADING = "loading"
    APPENDED = "appended"
    EXHAUSTED = "exhausted"
    REPLACED = "replaced"
    CLEARED = "cleared"
    FAILED = "failed"


class StateChange(NamedTuple):
    """Notification sent to listeners after a listing changes."""

    listing: Listing
    reason: ChangeReason


Listener = Callable[[StateChange], None]


class ListingState:
    """Pagination state for one listing.

    ``page`` is the next page to request and ``has_more`` stays true while
    ``page <= total_pages`` as last reported by the API. ``in_flight`` is set
    while a fetch for this listing is outstanding.
    """

    def __init__(self, listing: Listing) -> None:
        self.listing = listing
        self.movies: list[Movie] = []
        self.page = 1
        self.has_more = True
        self.in_flight = False
        self.last_error: FetchError | None = None

    def clear_results(self) -> None:
        # A fetch already in flight still completes, so in_flight is kept.
        self.movies = []
        self.last_error = None

    def __repr__(self) -> str:
        return (
            f"ListingState({self.listing.value}, movies={len(self.movies)}, "
            f"page={self.page}, has_more={self.has_more}, in_flight={self.in_flight})"
        )


class CatalogAggregator:
    """Fetches and accumulates movie listings for a catalog screen.

    Two independent machines share the fetch algorithm: ``popular`` appends
    page after page, while ``search`` fetches page 1 of a query and replaces
    its results. Every operation is safe to call repeatedly from a render
    loop; a call made while the same listing is already fetching is a no-op.

    Listeners registered with :meth:`subscribe` are called synchronously, on
    the event loop running the operation, after each state change.
    """

    # Trigger the next page once one of the last N movies is shown
    NEAR_END_COUNT = 5

    def __init__(self, service: BaseMovieService) -> None:
        self.service = service
        self.popular = ListingState(Listing.POPULAR)
        self.search = ListingState(Listing.SEARCH)
        self.search_query = ""
        self.error_message: str | None = None
        self._listeners: list[Listener] = []

    @property
    def movies(self) -> tuple[Movie, ...]:
        return tuple(self.popular.movies)

    @property
    def search_results(self) -> tuple[Movie, ...]:
        return tuple(self.search.movies)

    @property
    def is_loading(self) -> bool:
        return self.popular.in_flight or self.search.in_flight

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state-change listener and return a function removing it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, listing: Listing, reason: ChangeReason) -> None:
        change = StateChange(listing, reason)
        for listener in list(self._listeners):
            listener(change)

    async def load_next(self) -> bool:
        """Fetch the next page of popular movies and append it.

        Returns:
            True if a request was made, False if the call was a no-op because
            a fetch is in flight or there are no more pages.
        """
        state = self.popular
        if state.in_flight or not state.has_more:
            logger.debug("Skipping load_next: %r", state)
            return False

        response = await self._fetch(state, partial(self.service.list_popular, state.page))
        if response is None:
            return True

        state.movies.extend(response.results)
        state.page += 1
        state.has_more = state.page <= response.total_pages
        logger.debug("Loaded popular page %d: %r", response.page, state)

        self._notify(
            Listing.POPULAR,
            ChangeReason.APPENDED if state.has_more else ChangeReason.EXHAUSTED,
        )
        return True

    async def trigger_if_near_end(self, movie: Movie) -> bool:
        """Load the next page if ``movie`` is among the last few shown.

        A movie that isn't in the listing counts as index 0, so it only
        triggers a load while the listing holds ``NEAR_END_COUNT`` movies or
        fewer.
        """
        movies = self.popular.movies
        threshold = len(movies) - self.NEAR_END_COUNT
        index = next((i for i, m in enumerate(movies) if m.id == movie.id), 0)

        if index >= threshold and self.popular.has_more:
            return await self.load_next()
        return False

    async def run_search(self, query: str) -> bool:
        """Search for ``query`` and replace the search results with page 1.

        An empty query clears the results without a request. A call made
        while a search is in flight is rejected.

        Returns:
            True if a request was made.
        """
        state = self.search

        if not query:
            self.search_query = query
            state.clear_results()
            self._notify(Listing.SEARCH, ChangeReason.CLEARED)
            return False

        if state.in_flight:
            logger.debug("Skipping search for %r: %r", query, state)
            return False

        self.search_query = query

        response = await self._fetch(state, partial(self.service.search, query, 1))
        if response is None:
            return True

        state.movies = list(response.results)
        logger.debug("Search %r returned %d movies", query, len(state.movies))

        self._notify(Listing.SEARCH, ChangeReason.REPLACED)
        return True

    def clear(self) -> None:
        """Reset the search query and results. The popular listing is untouched."""
        self.search_query = ""
        self.search.clear_results()
        self._notify(Listing.SEARCH, ChangeReason.CLEARED)

    async def _fetch(
        self,
        state: ListingState,
        request: Callable[[], Awaitable[MoviePage]],
    ) -> MoviePage | None:
        """Run one request for ``state`` under its in-flight guard.

        Returns None if the request failed; the error is recorded on the
        state and in ``error_message``.
        """
        state.in_flight = True
        self.error_message = None
        try:
            self._notify(state.listing, ChangeReason.LOADING)
            response = await request()
        except FetchError as e:
            logger.warning("Fetching %s failed: %s", state.listing.value, e.message)
            state.last_error = e
            self.error_message = e.message
            response = None
        finally:
            state.in_flight = False

        if response is None:
            self._notify(state.listing, ChangeReason.FAILED)
        else:
            state.last_error = None
        return response
