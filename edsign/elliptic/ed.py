from __future__ import annotations

from functools import cached_property
from typing import Optional

from .util import FE_SIZE, tobytes, toint

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2 over prime field p

# Points are represented in extended coordinates (X, Y, Z, T),
# with x = X/Z, y = Y/Z, x*y = T/Z


class TwistedEdwards:
  """Curve constants a, d over the prime field p"""
  def __init__(self, name: str, p: int, a: int, d: int):
    self.name = name
    self.p = p
    self.a = a % p
    self.d = d % p

  def __repr__(self): return f"TwistedEdwards({self.name})"

  def point(self, x: int, y: int) -> EdPoint:
    return EdPoint(self, x, y)

  @cached_property
  def zero(self) -> EdPoint:
    """Neutral element"""
    return EdPoint(self, 0, 1)

  def inv(self, x: int) -> int:
    # Fermat inversion maps zero to zero rather than raising, off-curve
    # garbage is caught by is_on_curve instead
    return pow(x, self.p - 2, self.p)


class EdPoint:
  def __init__(self, curve: TwistedEdwards, x: int, y: int, z: int = 1, t: Optional[int] = None):
    p = curve.p
    self.curve = curve
    self.X = x % p
    self.Y = y % p
    self.Z = z % p
    self.T = x * y % p if t is None else t % p

  @staticmethod
  def from_bytes(curve: TwistedEdwards, b) -> EdPoint:
    """Read X || Y, both big endian. The point is not checked to be on curve."""
    if len(b) != 2 * FE_SIZE: raise ValueError("Should be exactly 64 bytes")
    x, y = toint(b[:FE_SIZE]), toint(b[FE_SIZE:])
    if x >= curve.p or y >= curve.p: raise ValueError("Coordinate out of field range")
    return EdPoint(curve, x, y)

  def __repr__(self): return f"EdPoint({self.x}, {self.y})"
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.x) + tobytes(self.y)
  def __hash__(self): return hash((self.x, self.y))

  @cached_property
  def x(self) -> int: return self.X * self.curve.inv(self.Z) % self.curve.p

  @cached_property
  def y(self) -> int: return self.Y * self.curve.inv(self.Z) % self.curve.p

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.curve, self.x, self.y)

  @cached_property
  def is_on_curve(self) -> bool:
    c = self.curve
    x2, y2 = self.x * self.x, self.y * self.y
    return (c.a * x2 + y2 - 1 - c.d * x2 * y2) % c.p == 0

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    if othr.curve is not self.curve: raise ValueError("Cannot add points of different curves")
    c = self.curve
    p = c.p
    # Unified addition (add-2008-hwcd), complete when a is square and d is not
    A = self.X * othr.X % p
    B = self.Y * othr.Y % p
    C = c.d * self.T * othr.T % p
    D = self.Z * othr.Z % p
    E = ((self.X + self.Y) * (othr.X + othr.Y) - A - B) % p
    F, G, H = D - C, D + C, B - c.a * A
    return EdPoint(c, E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(self.curve, -self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar (double and add, not constant time)."""
    if not isinstance(s, int): return NotImplemented
    if s < 0: return -self * -s
    Q = self.curve.zero
    P = self
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q.norm

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    if othr.curve is not self.curve: return False
    p = self.curve.p
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) % p == 0 and
      (self.Y * othr.Z - othr.Y * self.Z) % p == 0
    )
