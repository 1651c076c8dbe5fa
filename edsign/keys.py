from __future__ import annotations

from dataclasses import dataclass

from edsign.elliptic import BN254, FE_SIZE, CurveParams, EdPoint, consteq, toint
from edsign.exceptions import MalformedKeyError, MalformedSignatureError

# Wire sizes in bytes
SEED_SIZE = 32
PUBLIC_KEY_SIZE = 2 * FE_SIZE
SIGNATURE_SIZE = 3 * FE_SIZE
PRIVATE_KEY_SIZE = 2 * FE_SIZE + PUBLIC_KEY_SIZE


def _point(b: bytes, params: CurveParams, what: str, exc=MalformedKeyError) -> EdPoint:
  try:
    return EdPoint.from_bytes(params.curve, b)
  except ValueError as e:
    raise exc(f"Invalid {what}: {e}") from None


@dataclass(frozen=True, eq=False)
class PublicKey:
  """EdDSA public key, the point A = s * Base"""
  A: EdPoint

  @staticmethod
  def from_bytes(b, params: CurveParams = BN254) -> PublicKey:
    """Decode X || Y (64 bytes). Curve membership is checked by verify."""
    if len(b) != PUBLIC_KEY_SIZE:
      raise MalformedKeyError(f"Public key should be {PUBLIC_KEY_SIZE} bytes, got {len(b)}")
    return PublicKey(_point(bytes(b), params, "public key"))

  def __bytes__(self): return bytes(self.A)
  def __str__(self): return bytes(self).hex()
  def __repr__(self): return f"PublicKey({self})"
  def __hash__(self): return hash(bytes(self))

  def __eq__(self, other):
    # Constant time on the encodings, never on raw coordinates
    if not isinstance(other, PublicKey): return NotImplemented
    return consteq(bytes(self), bytes(other))


@dataclass(frozen=True, eq=False, repr=False)
class PrivateKey:
  """
  EdDSA private key.

  :param scalar: clamped secret scalar, 32 bytes big endian
  :param randsrc: 32 bytes used only for deriving blinding factors
  :param public: the associated public key
  """
  scalar: bytes
  randsrc: bytes
  public: PublicKey

  @staticmethod
  def from_bytes(b, params: CurveParams = BN254) -> PrivateKey:
    """Decode scalar || randsrc || public key (128 bytes)."""
    if len(b) != PRIVATE_KEY_SIZE:
      raise MalformedKeyError(f"Private key should be {PRIVATE_KEY_SIZE} bytes, got {len(b)}")
    b = bytes(b)
    scalar, randsrc = b[:FE_SIZE], b[FE_SIZE:2 * FE_SIZE]
    public = PublicKey.from_bytes(b[2 * FE_SIZE:], params)
    if public != PublicKey(toint(scalar) * params.base):
      raise MalformedKeyError("Private key does not match its public key")
    return PrivateKey(scalar, randsrc, public)

  def __bytes__(self): return self.scalar + self.randsrc + bytes(self.public)
  def __repr__(self): return f"PrivateKey[{self.public}]"

  def __eq__(self, other):
    if not isinstance(other, PrivateKey): return NotImplemented
    return consteq(bytes(self), bytes(other))

  def __hash__(self): return hash(self.public)


@dataclass(frozen=True, eq=False)
class Signature:
  """EdDSA signature: commitment point R and scalar S (32 bytes big endian)"""
  R: EdPoint
  S: bytes

  @staticmethod
  def from_bytes(b, params: CurveParams = BN254) -> Signature:
    """Decode R.X || R.Y || S (96 bytes). S is not range checked."""
    if len(b) != SIGNATURE_SIZE:
      raise MalformedSignatureError(f"Signature should be {SIGNATURE_SIZE} bytes, got {len(b)}")
    b = bytes(b)
    R = _point(b[:PUBLIC_KEY_SIZE], params, "R point on signature", MalformedSignatureError)
    return Signature(R, b[PUBLIC_KEY_SIZE:])

  def __bytes__(self): return bytes(self.R) + self.S
  def __str__(self): return bytes(self).hex()
  def __repr__(self): return f"Signature({self})"
  def __hash__(self): return hash(bytes(self))

  def __eq__(self, other):
    if not isinstance(other, Signature): return NotImplemented
    return bytes(self) == bytes(other)
