from secrets import token_bytes
from typing import Optional, Tuple

from edsign.elliptic import BN254, FE_SIZE, CurveParams, blake, clamp_scalar, tobytes, toint
from edsign.exceptions import InvalidPointError
from edsign.hashing import challenge
from edsign.keys import SEED_SIZE, PrivateKey, PublicKey, Signature

# EdDSA on a twisted Edwards curve with cofactored verification
# https://datatracker.ietf.org/doc/html/rfc8032
#
# Differences to RFC 8032 Ed25519: points are serialized as X || Y and scalars
# are stored big endian, the seed and the blinding hash are BLAKE2b-512 and the
# challenge hash is selected by the caller.


def generate_key(seed: Optional[bytes] = None, params: CurveParams = BN254) -> Tuple[PublicKey, PrivateKey]:
  """
  Derive a key pair from a 32-byte seed. Same seed, same keys.

  A random seed is used if none is given.
  """
  seed = token_bytes(SEED_SIZE) if seed is None else bytes(seed)
  if len(seed) != SEED_SIZE:
    raise ValueError(f"Seed should be exactly {SEED_SIZE} bytes")
  # h = secret scalar || random source, 32 bytes each
  h = blake(seed)
  scalar = clamp_scalar(h[:FE_SIZE])
  pub = PublicKey(toint(scalar) * params.base)
  return pub, PrivateKey(scalar, h[FE_SIZE:], pub)


def blinding_factor(priv: PrivateKey, message: bytes) -> int:
  """r = H(randsrc || message) truncated to 32 bytes, deterministic per key and message"""
  return toint(blake(priv.randsrc + message)[:FE_SIZE])


def sign(priv: PrivateKey, message: bytes, hfunc, params: CurveParams = BN254) -> Signature:
  """Sign message, using hfunc for the challenge hash H(R, A, M)."""
  message = bytes(message)
  r = blinding_factor(priv, message)
  R = r * params.base
  if not R.is_on_curve:
    raise InvalidPointError("Commitment point R is not on the curve")
  c = challenge(hfunc, R, priv.public.A, message)
  s = (r + c * toint(priv.scalar)) % params.order
  return Signature(R, tobytes(s))


def verify(sig: Signature, message: bytes, pub: PublicKey, hfunc, params: CurveParams = BN254) -> bool:
  """
  Verify a signature, returning False if the signature does not match.

  The check cofactor * S * Base == cofactor * (R + H(R, A, M) * A) clears any
  small order components of R and A.

  :raises InvalidPointError: if the public key or the computed points are not on the curve
  :raises HashWriteError: if hfunc fails
  """
  if not pub.A.is_on_curve:
    raise InvalidPointError("Public key is not on the curve")
  c = challenge(hfunc, sig.R, pub.A, message)
  lhs = params.cofactor * (toint(sig.S) * params.base)
  if not lhs.is_on_curve:
    raise InvalidPointError("Signature S * Base is not on the curve")
  rhs = params.cofactor * (sig.R + c * pub.A)
  if not rhs.is_on_curve:
    raise InvalidPointError("Signature R point is not on the curve")
  return lhs == rhs
