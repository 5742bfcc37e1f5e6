"""
feature.py

GeoJSON Polygon feature with LinearRing validation.

A `FeaturePolygon` is built from an ordered list of rings. Ring 0 is the
shell and any further rings are holes. The rings are checked once, at
construction, and stored as tuples so the value cannot change afterwards.

Encoding follows the GeoJSON Feature envelope: a "Polygon" geometry, a
properties object and no bbox, id or crs members.

"""
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
import json
import logging

from lodestone.polygon import convexity
from lodestone.polygon.config import JSON_SEPARATORS
from lodestone.polygon.errors import EmptyPolygonError, GeoJSONDecodeError
from lodestone.polygon.rings import Ring, as_ring, compare_rings, validate_ring

logger = logging.getLogger(__name__)


class FeaturePolygon:
    """Immutable GeoJSON Polygon feature.

    Raises `EmptyPolygonError`, `RingTooShortError`, `RingNotClosedError`
    or `InvalidPositionError` (all `PolygonError`) for bad coordinates.
    """

    # tolerant equality cannot be made hash-consistent
    __hash__ = None

    def __init__(self, coordinates: Sequence[Sequence[Sequence[float]]],
                 properties: Optional[Mapping[str, Any]] = None):
        if coordinates is None or len(coordinates) == 0:
            logger.debug('rejected polygon with no rings')
            raise EmptyPolygonError("A Polygon must have at least one LinearRing")

        rings = []
        for i, ring in enumerate(coordinates):
            r = as_ring(ring, i)
            validate_ring(r, i)
            rings.append(r)
        self._rings: Tuple[Ring, ...] = tuple(rings)
        self._properties: Dict[str, Any] = dict(properties) if properties else {}

    @property
    def coordinates(self) -> Tuple[Ring, ...]:
        return self._rings

    @property
    def shell(self) -> Ring:
        return self._rings[0]

    @property
    def holes(self) -> Tuple[Ring, ...]:
        return self._rings[1:]

    @property
    def properties(self) -> Dict[str, Any]:
        """Copy of the feature's properties."""
        return dict(self._properties)

    def is_convex(self) -> bool:
        """Check if the outer ring of the polygon is convex."""
        return convexity.is_convex(self)

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, FeaturePolygon):
            return NotImplemented
        if len(self._rings) != len(other._rings):
            return False
        return all(compare_rings(r1, r2) for r1, r2 in zip(self._rings, other._rings))

    # -- encoding -----------------------------------------------------------

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return {
            "type": "Polygon",
            "coordinates": [[list(pos) for pos in ring] for ring in self._rings],
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": self.__geo_interface__,
            "properties": self.properties,
        }

    def to_json(self) -> str:
        """Compact GeoJSON text with sorted keys."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=JSON_SEPARATORS)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"FeaturePolygon(rings={len(self._rings)}, shell_positions={len(self.shell)})"

    def to_shapely(self):
        """Return the polygon as a `shapely.geometry.Polygon`."""
        from shapely.geometry import Polygon
        return Polygon(self.shell, self.holes)

    # -- decoding -----------------------------------------------------------

    @classmethod
    def from_json(cls, text) -> "FeaturePolygon":
        """Parse GeoJSON Feature text.

        Raises `GeoJSONDecodeError` for malformed JSON, input that is not
        text, or a top-level value that is not an object.
        """
        try:
            obj = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.debug('malformed GeoJSON text: %s', exc)
            raise GeoJSONDecodeError("Encountered malformed JSON") from exc
        if not isinstance(obj, dict):
            logger.debug('top-level GeoJSON value is %s, not an object', type(obj).__name__)
            raise GeoJSONDecodeError("Attempted to create GeoJSON from JSON that is not an object")
        return cls.from_dict(obj)

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "FeaturePolygon":
        """Build from a decoded GeoJSON Feature mapping.

        Envelope problems raise `GeoJSONDecodeError`; ring problems raise
        the usual `PolygonError` subclasses.
        """
        if not isinstance(obj, Mapping):
            raise GeoJSONDecodeError(f"Expected a GeoJSON object, got {type(obj).__name__}")
        if obj.get("type") != "Feature":
            raise GeoJSONDecodeError(f"Expected a GeoJSON Feature, got type {obj.get('type')!r}")

        geometry = obj.get("geometry")
        if not isinstance(geometry, dict):
            raise GeoJSONDecodeError("Feature has no geometry object")
        if geometry.get("type") != "Polygon":
            raise GeoJSONDecodeError(f"Expected a Polygon geometry, got type {geometry.get('type')!r}")

        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, list) or not all(isinstance(r, list) for r in coordinates):
            raise GeoJSONDecodeError("Polygon coordinates must be a list of rings")

        properties = obj.get("properties")
        if properties is not None and not isinstance(properties, dict):
            raise GeoJSONDecodeError("Feature properties must be an object or null")

        return cls(coordinates, properties)
