"""Feed source port."""

from typing import Protocol

from hk_transit_optimizer.domain.models.feed_records import FeedTables


class FeedSource(Protocol):
    """Port for loading the static rail feed."""

    async def load(self) -> FeedTables:
        """Load all required tables. Raises FeedLoadError on failure."""
        ...
