# cities.py
# Static directory of known cities used to map a coordinate onto curated data.

import logging
from typing import NamedTuple, Optional

from app.core.config import settings
from app.geo import haversine_km

logger = logging.getLogger(__name__)


class City(NamedTuple):
    name: str
    lat: float
    lng: float
    country: str


CITY_DIRECTORY = (
    City("Naples", 40.8358, 14.2488, "Italy"),
    City("Milan", 45.4642, 9.1900, "Italy"),
    City("Florence", 43.7696, 11.2558, "Italy"),
    City("Rome", 41.9028, 12.4964, "Italy"),
    City("Lyon", 45.7640, 4.8357, "France"),
    City("Paris", 48.8566, 2.3522, "France"),
    City("London", 51.5074, -0.1278, "United Kingdom"),
    City("Marrakesh", 31.6295, -7.9811, "Morocco"),
    City("Cape Town", -33.9249, 18.4241, "South Africa"),
    City("Mumbai", 19.0760, 72.8777, "India"),
    City("Georgetown", 5.4141, 100.3296, "Malaysia"),
    City("Bangkok", 13.7563, 100.5018, "Thailand"),
    City("Tokyo", 35.6762, 139.6503, "Japan"),
    City("Sydney", -33.8688, 151.2093, "Australia"),
    City("Austin", 30.2672, -97.7431, "USA"),
    City("New Orleans", 29.9511, -90.0715, "USA"),
    City("New York", 40.7128, -74.0060, "USA"),
    City("Mexico City", 19.4326, -99.1332, "Mexico"),
    City("Lima", -12.0464, -77.0428, "Peru"),
)


def find_nearest_city(lat: float, lng: float, radius_km: Optional[float] = None) -> Optional[City]:
    """
    Closest directory entry to (lat, lng), or None if it is farther than `radius_km`.

    Linear scan over the directory; on an exact distance tie the entry listed
    first wins.
    """
    if radius_km is None:
        radius_km = settings.SEARCH_RADIUS_KM

    nearest = None
    nearest_distance = float("inf")
    for city in CITY_DIRECTORY:
        distance = haversine_km(lat, lng, city.lat, city.lng)
        if distance < nearest_distance:
            nearest = city
            nearest_distance = distance

    if nearest is None or nearest_distance > radius_km:
        logger.debug(f"No known city within {radius_km}km of ({lat}, {lng})")
        return None

    logger.debug(f"Nearest city to ({lat}, {lng}) is {nearest.name} at {nearest_distance:.1f}km")
    return nearest
