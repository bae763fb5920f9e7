"""GTFS feed adapters."""

from hk_transit_optimizer.adapters.gtfs.gtfs_feed_source import GtfsFeedSource, read_feed_archive
from hk_transit_optimizer.adapters.gtfs.table_parser import parse_table

__all__ = ["GtfsFeedSource", "parse_table", "read_feed_archive"]
