"""LinearRing helpers: coercion, validation and tolerant comparison."""
from numbers import Real
import math
from typing import Sequence, Tuple
import logging

from lodestone.polygon.config import COORDINATE_TOLERANCE, MAX_LATITUDE_DEG, MIN_RING_POSITIONS
from lodestone.polygon.errors import (
    InvalidPositionError,
    RingNotClosedError,
    RingTooShortError,
)

logger = logging.getLogger(__name__)

Position = Tuple[float, float]
Ring = Tuple[Position, ...]


def _is_number(v) -> bool:
    # bool is a Real; a True/False coordinate is a caller mistake
    return isinstance(v, Real) and not isinstance(v, bool)


def as_ring(ring: Sequence[Sequence[float]], ring_index: int = 0) -> Ring:
    """Coerce a sequence of positions into a tuple of (float, float) tuples.

    Accepts lists, tuples or numpy rows. Raises `InvalidPositionError`
    for anything that is not a pair of finite numbers with a latitude
    inside [-90, 90].
    """
    out = []
    for pos in ring:
        try:
            x, y = pos
        except (TypeError, ValueError) as exc:
            logger.debug('ring %d: rejected position %r', ring_index, pos)
            raise InvalidPositionError(
                f"Ring {ring_index}: position {pos!r} is not a (lon, lat) pair",
                ring_index=ring_index,
            ) from exc
        if not (_is_number(x) and _is_number(y)):
            logger.debug('ring %d: non-numeric position %r', ring_index, pos)
            raise InvalidPositionError(
                f"Ring {ring_index}: position {pos!r} must hold numbers",
                ring_index=ring_index,
            )
        if not (math.isfinite(x) and math.isfinite(y)) or abs(y) > MAX_LATITUDE_DEG:
            logger.debug('ring %d: out-of-range position %r', ring_index, pos)
            raise InvalidPositionError(
                f"Ring {ring_index}: position {pos!r} must be finite with |lat| <= {MAX_LATITUDE_DEG}",
                ring_index=ring_index,
            )
        out.append((float(x), float(y)))
    return tuple(out)


def validate_ring(ring: Ring, ring_index: int = 0) -> None:
    """Check the LinearRing rules on one ring.

    Raises `RingTooShortError` for fewer than 4 positions and
    `RingNotClosedError` when first and last positions differ.
    """
    if len(ring) < MIN_RING_POSITIONS:
        logger.debug('ring %d: %d positions, need %d', ring_index, len(ring), MIN_RING_POSITIONS)
        raise RingTooShortError(
            f"Each LinearRing of a Polygon must have {MIN_RING_POSITIONS} or more positions "
            f"(ring {ring_index} has {len(ring)})",
            ring_index=ring_index,
        )
    if ring[0] != ring[-1]:
        logger.debug('ring %d: first %r != last %r', ring_index, ring[0], ring[-1])
        raise RingNotClosedError(
            f"Ring {ring_index} is not closed: first position {ring[0]!r} "
            f"differs from last position {ring[-1]!r}",
            ring_index=ring_index,
        )


def compare_rings(ring1: Sequence[Sequence[float]], ring2: Sequence[Sequence[float]],
                  tol: float = COORDINATE_TOLERANCE) -> bool:
    """True if every position pair differs by less than `tol` on both axes.

    Rings are compared positionally; the first mismatch ends the scan.
    """
    if len(ring1) != len(ring2):
        return False
    for (x1, y1), (x2, y2) in zip(ring1, ring2):
        if not (abs(x1 - x2) < tol and abs(y1 - y2) < tol):
            return False
    return True
