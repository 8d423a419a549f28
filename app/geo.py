# geo.py
# Great-circle distance and coarse geographic helpers used by the recipe search.

import math
from typing import NamedTuple, Optional

EARTH_RADIUS_KM = 6371.0


def _is_finite(*values) -> bool:
    for value in values:
        if value is None or isinstance(value, bool):
            return False
        try:
            if not math.isfinite(value):
                return False
        except TypeError:
            return False
    return True


def haversine_km(lat1, lng1, lat2, lng2) -> float:
    """
    Great-circle distance in kilometers between two (lat, lng) points in degrees.

    Returns math.inf when any coordinate is missing or not a finite number, so
    callers can filter with `distance <= radius` without checking for None.
    """
    if not _is_finite(lat1, lng1, lat2, lng2):
        return math.inf

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push `a` just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


# Absorbs floating point error at the box edges
_BOX_EPSILON_DEG = 1e-9


def bounding_box(lat: float, lng: float, radius_km: float) -> BoundingBox:
    """
    Rectangle in degrees containing every point within `radius_km` of (lat, lng).

    The box may be larger than the circle but never smaller. When the circle
    reaches a pole or crosses the antimeridian the full longitude range is used.
    """
    angular = radius_km / EARTH_RADIUS_KM
    lat_delta = math.degrees(angular)

    min_lat = lat - lat_delta - _BOX_EPSILON_DEG
    max_lat = lat + lat_delta + _BOX_EPSILON_DEG

    if min_lat <= -90 or max_lat >= 90 or angular >= math.pi / 2:
        return BoundingBox(max(min_lat, -90.0), min(max_lat, 90.0), -180.0, 180.0)

    cos_lat = math.cos(math.radians(lat))
    # d / cos(lat) is the flat approximation; on the sphere the widest point of
    # the circle lies off the center latitude, which asin(sin d / cos lat) covers.
    lng_delta = math.degrees(max(
        angular / cos_lat,
        math.asin(min(1.0, math.sin(angular) / cos_lat)),
    ))

    min_lng = lng - lng_delta - _BOX_EPSILON_DEG
    max_lng = lng + lng_delta + _BOX_EPSILON_DEG
    if min_lng < -180 or max_lng > 180:
        min_lng, max_lng = -180.0, 180.0

    return BoundingBox(min_lat, max_lat, min_lng, max_lng)


# Ordered: the first box containing the point wins.
REGION_BOXES = (
    ("Europe", BoundingBox(35.0, 71.5, -25.0, 45.0)),
    ("East Asian", BoundingBox(20.0, 54.0, 100.0, 146.0)),
    ("Southeast Asian", BoundingBox(-11.0, 20.0, 92.0, 141.0)),
    ("South Asian", BoundingBox(5.0, 37.0, 60.0, 92.0)),
    ("North American", BoundingBox(15.0, 72.0, -168.0, -52.0)),
    ("South American", BoundingBox(-56.0, 13.0, -82.0, -34.0)),
    ("African", BoundingBox(-35.0, 37.5, -18.0, 52.0)),
)

DEFAULT_REGION = "Local"


def region_label(lat: Optional[float], lng: Optional[float]) -> str:
    """Coarse culinary region for a coordinate, e.g. "Southeast Asian"."""
    if not _is_finite(lat, lng):
        return DEFAULT_REGION
    for label, box in REGION_BOXES:
        if box.contains(lat, lng):
            return label
    return DEFAULT_REGION
