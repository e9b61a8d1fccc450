"""Application bootstrap: builds the catalog components and owns their lifetime."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta

from movieflix import __version__
from movieflix.config import Settings, get_settings
from movieflix.services.catalog import MovieService
from movieflix.services.tmdb import TMDBClient
from movieflix.viewmodels.catalog import CatalogAggregator
from movieflix.widget.manager import WidgetDataManager
from movieflix.widget.store import InMemorySnapshotStore, SnapshotStore
from movieflix.widget.timeline import WidgetTimelineProvider

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class AppContext:
    """Process-wide components, created once and passed by reference."""

    def __init__(
        self,
        settings: Settings,
        client: TMDBClient,
        store: SnapshotStore,
    ) -> None:
        self.settings = settings
        self.client = client
        self.service = MovieService(client, language=settings.tmdb_language)
        self.catalog = CatalogAggregator(self.service)
        self.widget_data = WidgetDataManager(
            store,
            key=settings.widget_store_key,
            limit=settings.widget_movie_limit,
        )
        self.widget_timeline = WidgetTimelineProvider(
            self.widget_data,
            refresh_interval=timedelta(minutes=settings.widget_refresh_minutes),
        )

    async def close(self) -> None:
        await self.client.close()


def create_app_context(
    settings: Settings | None = None,
    store: SnapshotStore | None = None,
) -> AppContext:
    """Build the application components from settings."""
    settings = settings or get_settings()
    client = TMDBClient(
        api_key=settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        timeout=settings.tmdb_timeout,
    )
    return AppContext(settings, client, store or InMemorySnapshotStore())


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    store: SnapshotStore | None = None,
) -> AsyncIterator[AppContext]:
    """Application lifespan - builds the context and closes it on exit."""
    settings = settings or get_settings()

    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("TMDB API: %s", "configured" if settings.tmdb_api_key else "NOT CONFIGURED")

    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)

    context = create_app_context(settings, store)
    try:
        yield context
    finally:
        # Shutdown
        await context.close()
        logger.info("Application shutting down")


async def show_popular(context: AppContext) -> list[str]:
    """Load the first page of popular movies and refresh the widget snapshot."""
    await context.catalog.load_next()
    if context.catalog.error_message:
        logger.error("Could not load popular movies: %s", context.catalog.error_message)
        return []

    context.widget_data.update_trending_movies(context.catalog.movies)
    return [
        f"{movie.title} ({movie.release_year or 'N/A'}) - {movie.formatted_rating}"
        for movie in context.catalog.movies
    ]


async def _main() -> int:
    async with lifespan() as context:
        lines = await show_popular(context)
    for line in lines:
        print(line)
    return 0 if lines else 1


def run() -> int:
    """Console entry point."""
    configure_logging(get_settings())
    return asyncio.run(_main())
