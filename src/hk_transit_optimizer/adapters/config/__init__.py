"""Configuration adapters."""

from hk_transit_optimizer.adapters.config.alias_table_loader import AliasTableLoader
from hk_transit_optimizer.adapters.config.app_config import AppConfig

__all__ = ["AliasTableLoader", "AppConfig"]
