"""Place alias table loader."""

from hk_transit_optimizer.adapters.config.app_config import AppConfig
from hk_transit_optimizer.domain.models.place_alias import PlaceAlias


class AliasTableLoader:
    """Loads the label -> (query, station code) alias table from app config."""

    @staticmethod
    def load(config: AppConfig) -> dict[str, PlaceAlias]:
        """Load aliases from the [[aliases]] entries of the TOML file."""
        toml_data = config.load_toml_data()
        entries = toml_data.get("aliases", [])
        if not isinstance(entries, list):
            raise ValueError("TOML config 'aliases' must be a list")

        aliases: dict[str, PlaceAlias] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            label = str(entry.get("label", "")).strip()
            query = str(entry.get("query", "")).strip()
            if not label or not query:
                continue

            station_code = entry.get("station_code")
            if station_code is not None:
                station_code = str(station_code).strip().upper() or None

            if label in aliases:
                raise ValueError(f"Duplicate alias label: {label}")
            aliases[label] = PlaceAlias(label=label, query=query, station_code=station_code)

        return aliases
