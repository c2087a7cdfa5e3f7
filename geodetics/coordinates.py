"""
Value types for points, vectors and bearings
"""

__all__ = ['BearingResult', 'CartesianVector', 'CONVERGENCE_FAILURE', 'GeodeticPoint']

import math
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from geodetics._const import SENTINEL_VALUE


class GeodeticPoint:
    """
    Representation of a point referenced to an ellipsoid (i.e., a lat/lon pair with an
    optional height above the ellipsoid)

    Longitudes are wrapped into [-180, 180]. Latitudes are left as given.
    """

    __slots__ = ('_latitude', '_longitude', '_height')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        height: Optional[float] = None,
        _bounded: bool = True,
    ):
        lat, lon = float(latitude), float(longitude)
        if _bounded and math.isfinite(lon) and not -180 <= lon <= 180:
            # Crosses the antimeridian; +180 stays +180
            wrapped = (lon + 180.) % 360. - 180.
            lon = 180. if wrapped == -180. and lon > 0 else wrapped

        self._latitude = lat
        self._longitude = lon
        self._height = None if height is None else float(height)

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height))

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.latitude, self.longitude, self.height))
        return f'<GeodeticPoint({", ".join(map(str, parts))})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def height(self) -> Optional[float]:
        return self._height

    @property
    def is_sentinel(self) -> bool:
        """True if this point is the marker returned by a non-converging conversion"""
        return (
            self._latitude == SENTINEL_VALUE and
            self._longitude == SENTINEL_VALUE and
            self._height == SENTINEL_VALUE
        )

    def to_float(self) -> Tuple:
        """
        Converts the point to a tuple of floats (latitude, longitude). If the point has
        a height, the tuple is extended to include it.

        Returns:
            Tuple of up to length 3, consisting of (latitude, longitude, height)
        """
        if self._height is None:
            return self._latitude, self._longitude

        return self._latitude, self._longitude, self._height


# Returned in place of a result when Cartesian -> geodetic iteration fails to converge
CONVERGENCE_FAILURE = GeodeticPoint(
    SENTINEL_VALUE, SENTINEL_VALUE, SENTINEL_VALUE, _bounded=False
)


class CartesianVector:
    """A point or direction (x, y, z) in a Cartesian frame"""

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x: float, y: float, z: float):
        self._x, self._y, self._z = float(x), float(y), float(z)

    def __eq__(self, other):
        if not isinstance(other, CartesianVector):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y, self._z))

    def __repr__(self):
        return f'<CartesianVector({self._x}, {self._y}, {self._z})>'

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def norm(self) -> float:
        """The Euclidean length of the vector"""
        return math.sqrt(self._x * self._x + self._y * self._y + self._z * self._z)

    @classmethod
    def from_numpy(cls, arr: Union[np.ndarray, Sequence[float]]):
        """Create a CartesianVector from any length-3 array-like"""
        x, y, z = np.asarray(arr, dtype=float).reshape(3)
        return cls(x, y, z)

    def scale(self, factor: float):
        """Multiply each component by a factor, e.g. to convert kilometers to meters"""
        return CartesianVector(self._x * factor, self._y * factor, self._z * factor)

    def to_numpy(self) -> np.ndarray:
        return np.array([self._x, self._y, self._z])


class BearingResult:
    """
    The solution of an inverse geodesic problem.

    Args:
        azimuth:
            The forward azimuth from the first point to the second, in degrees clockwise
            from north, [0, 360)

        backazimuth:
            The azimuth from the second point back to the first, in degrees clockwise
            from north, [0, 360)

        distance:
            The geodesic distance between the points, in kilometers
    """

    __slots__ = ('_azimuth', '_backazimuth', '_distance')

    def __init__(self, azimuth: float, backazimuth: float, distance: float):
        self._azimuth = float(azimuth)
        self._backazimuth = float(backazimuth)
        self._distance = float(distance)

    def __eq__(self, other):
        if not isinstance(other, BearingResult):
            return False

        return (
            self.azimuth == other.azimuth and
            self.backazimuth == other.backazimuth and
            self.distance == other.distance
        )

    def __hash__(self):
        return hash((self.azimuth, self.backazimuth, self.distance))

    def __repr__(self):
        return f'<BearingResult({self._azimuth}, {self._backazimuth}, {self._distance})>'

    def __str__(self):
        return (
            f'Azimuth: {self._azimuth} Back azimuth: {self._backazimuth} '
            f'Distance: {self._distance}'
        )

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def backazimuth(self) -> float:
        return self._backazimuth

    @property
    def distance(self) -> float:
        """Distance in kilometers"""
        return self._distance
