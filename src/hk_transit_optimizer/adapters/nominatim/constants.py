"""Constants for the Nominatim geocoder adapter.

API documentation: https://nominatim.org/release-docs/latest/api/Search/

The public instance allows at most one request per second and requires an
identifying User-Agent.
"""

NOMINATIM_SEARCH_PATH = "/search"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
