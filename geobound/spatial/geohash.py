"""
GeoHash Codec
=============
Bit-interleaved encoding of a lng/lat rectangle.

Each bit bisects one axis of the current rectangle, starting with
longitude and alternating after every bit:

    bit 0  →  keep the lower half   [min, mid]
    bit 1  →  keep the upper half   [mid, max]

String hashes carry five bits per base-32 character; integer hashes carry
an explicit bit count, most significant bit first.  Decoding is a left
fold over the bit sequence.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Iterator

from geobound.errors import InvalidArgumentError, InvalidEncodingError

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
_DECODE_MAP = {c: i for i, c in enumerate(BASE32)}

Range = tuple[float, float]
# (longitude range, latitude range, next bit is longitude)
_State = tuple[Range, Range, bool]

_WORLD: _State = ((-180.0, 180.0), (-90.0, 90.0), True)


# ── Bit sources ──────────────────────────────────────────────────


def bits_of(geohash: str) -> Iterator[int]:
    """Yield the 5-bit groups of a base-32 hash, most significant first."""
    for c in geohash:
        try:
            value = _DECODE_MAP[c]
        except KeyError as e:
            raise InvalidEncodingError(f"Invalid geohash character: {c!r}") from e

        for mask in (16, 8, 4, 2, 1):
            yield 1 if value & mask else 0


def int_bits_of(geohash: int, bits: int) -> Iterator[int]:
    """Yield ``bits // 2`` (lng, lat) bit pairs of a packed hash, MSB first."""
    cursor = bits
    for _ in range(bits // 2):
        cursor -= 1
        yield (geohash >> cursor) & 1
        cursor -= 1
        yield (geohash >> cursor) & 1


# ── Decoding ─────────────────────────────────────────────────────


def _narrow(rng: Range, bit: int) -> Range:
    lo, hi = rng
    mid = (lo + hi) / 2.0
    return (mid, hi) if bit else (lo, mid)


def _step(state: _State, bit: int) -> _State:
    lng, lat, even = state
    if even:
        return _narrow(lng, bit), lat, False
    return lng, _narrow(lat, bit), True


def ranges_from_bits(bits: Iterable[int]) -> tuple[float, float, float, float]:
    """Fold a bit sequence into ``(west, east, south, north)``."""
    (west, east), (south, north), _ = reduce(_step, bits, _WORLD)
    return west, east, south, north


def decode_ranges(geohash: str) -> tuple[float, float, float, float]:
    """
    Return ``(west, east, south, north)`` for a base-32 geohash.

    The alphabet is case-sensitive.  An empty hash decodes to the whole
    world.
    """
    return ranges_from_bits(bits_of(geohash))


def decode_int_ranges(geohash: int, bits: int) -> tuple[float, float, float, float]:
    """Return ``(west, east, south, north)`` for a packed integer hash."""
    return ranges_from_bits(int_bits_of(geohash, bits))


# ── Encoding ─────────────────────────────────────────────────────


def _choose(rng: Range, value: float) -> tuple[int, Range]:
    lo, hi = rng
    mid = (lo + hi) / 2.0
    if value >= mid:
        return 1, (mid, hi)
    return 0, (lo, mid)


def _point_bits(lng: float, lat: float, count: int) -> Iterator[int]:
    lng_rng, lat_rng = _WORLD[0], _WORLD[1]
    for i in range(count):
        if i % 2 == 0:
            bit, lng_rng = _choose(lng_rng, lng)
        else:
            bit, lat_rng = _choose(lat_rng, lat)
        yield bit


def encode(lng: float, lat: float, precision: int = 12) -> str:
    """Encode a point to a base-32 geohash of ``precision`` characters."""
    if precision <= 0:
        raise InvalidArgumentError("precision must be > 0")

    bits = list(_point_bits(lng, lat, precision * 5))
    out: list[str] = []
    for start in range(0, len(bits), 5):
        value = 0
        for bit in bits[start:start + 5]:
            value = (value << 1) | bit
        out.append(BASE32[value])

    return "".join(out)


def encode_int(lng: float, lat: float, bits: int = 52) -> int:
    """Encode a point to a packed integer hash of ``bits`` bits."""
    if bits <= 0:
        raise InvalidArgumentError("bits must be > 0")

    value = 0
    for bit in _point_bits(lng, lat, bits):
        value = (value << 1) | bit
    return value
