"""
Read-only city catalog.

The catalog owns the list of reference cities the clock and planning tools
work with. It never mutates its contents; building a different catalog means
constructing a new instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..utils.core.exceptions import CityNotFoundError, ValidationError
from ..utils.time import is_valid_timezone, resolve_timezone, standard_offset_minutes
from .defaults import DEFAULT_CITIES, POPULAR_CITY_NAMES
from .models import City

if TYPE_CHECKING:
    from ..config.schema import WorldClockConfig


logger = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    return name.strip().casefold()


class CityCatalog:
    """
    Ordered, read-only collection of cities with name lookup and search.

    Every city's timezone is validated on construction, and names must be
    unique ignoring case.
    """

    def __init__(self, cities: Iterable[City]) -> None:
        """
        Build a catalog from city records.

        Raises:
            InvalidTimezoneError: If a city's timezone is unknown
            ValidationError: If two cities share a name
        """
        self._cities: tuple[City, ...] = tuple(cities)
        self._by_name: dict[str, City] = {}

        for city in self._cities:
            _ = resolve_timezone(city.timezone_id)
            key = _name_key(city.name)
            if key in self._by_name:
                raise ValidationError(
                    f"Duplicate city name in catalog: {city.name!r}",
                    user_message=f"City '{city.name}' is listed more than once.",
                )
            self._by_name[key] = city

        logger.debug(f"City catalog loaded with {len(self._cities)} cities")

    @classmethod
    def default(cls) -> CityCatalog:
        """Create a catalog of the built-in world cities."""
        return cls(DEFAULT_CITIES)

    @classmethod
    def from_config(cls, config: WorldClockConfig) -> CityCatalog:
        """
        Create a catalog from configuration.

        Falls back to the built-in cities when none are configured.
        """
        if not config.cities:
            return cls.default()
        return cls(city_config.to_city() for city_config in config.cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _name_key(name) in self._by_name

    @property
    def cities(self) -> tuple[City, ...]:
        """All cities in catalog order."""
        return self._cities

    def find(self, name: str) -> City | None:
        """Look up a city by name ignoring case, or None if absent."""
        return self._by_name.get(_name_key(name))

    def get(self, name: str) -> City:
        """
        Look up a city by name ignoring case.

        Raises:
            CityNotFoundError: If no city has that name
        """
        city = self.find(name)
        if city is None:
            raise CityNotFoundError(name)
        return city

    def search(self, term: str) -> list[City]:
        """
        Find cities whose name or country contains the term, ignoring case.

        An empty term matches every city.
        """
        needle = term.strip().casefold()
        return [
            city
            for city in self._cities
            if needle in city.name.casefold() or needle in city.country.casefold()
        ]

    def popular(self) -> list[City]:
        """Quick-pick cities present in this catalog, falling back to all cities."""
        picks = [
            city for name in POPULAR_CITY_NAMES if (city := self.find(name)) is not None
        ]
        return picks or list(self._cities)

    def resolve(self, name_or_timezone: str) -> City:
        """
        Resolve a catalog city name or a raw IANA identifier to a City.

        Identifiers that are not catalog names produce an ad-hoc City named
        after the zone's last path component.

        Raises:
            CityNotFoundError: If the value is neither a city nor a timezone
        """
        city = self.find(name_or_timezone)
        if city is not None:
            return city

        timezone_id = name_or_timezone.strip()
        if "/" in timezone_id or timezone_id.upper() == "UTC":
            if is_valid_timezone(timezone_id):
                label = timezone_id.rsplit("/", 1)[-1].replace("_", " ")
                return City(
                    name=label,
                    country="",
                    timezone_id=timezone_id,
                    base_offset_minutes=standard_offset_minutes(timezone_id),
                )

        raise CityNotFoundError(name_or_timezone)
