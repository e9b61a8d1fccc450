"""View-models: UI-independent state for the catalog and detail screens."""

from movieflix.viewmodels.catalog import (
    CatalogAggregator,
    ChangeReason,
    Listing,
    ListingState,
    StateChange,
)
from movieflix.viewmodels.detail import MovieDetailViewModel

__all__ = [
    "CatalogAggregator",
    "ChangeReason",
    "Listing",
    "ListingState",
    "StateChange",
    "MovieDetailViewModel",
]
