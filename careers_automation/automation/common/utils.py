from typing import Iterable, Optional


def is_country_link(href: Optional[str], marker: str) -> bool:
    """
    Checks whether a location menu link points at a country page.

    The locations menu mixes country entries with other links, only the
    country ones carry the marker in their href.
    """
    if not href:
        return False
    return marker in href


def mentions_all_cities(address: Optional[str], cities: Iterable[str]) -> bool:
    """Returns True when a formatted job address names every one of the cities."""
    if not address:
        return False
    return all(city in address for city in cities)
