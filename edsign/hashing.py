import hashlib

from cryptography.hazmat.primitives import hashes

from edsign.exceptions import HashWriteError

# The challenge hash is selected by the caller. Accepted forms:
#  - factory returning a hashlib style object, e.g. hashlib.sha256
#  - hashlib algorithm name, e.g. "sha256"
#  - cryptography HashAlgorithm instance, e.g. hashes.SHA3_256()
# A fresh hash object is created for every challenge, so that nothing carries
# over between calls and a single factory may be shared between threads.


class CryptographyHash:
  """Adapter giving cryptography's Hash context the hashlib update/digest interface"""

  def __init__(self, algorithm: hashes.HashAlgorithm):
    self.name = algorithm.name
    self.digest_size = algorithm.digest_size
    self._ctx = hashes.Hash(algorithm)

  def update(self, data: bytes) -> None:
    self._ctx.update(data)

  def digest(self) -> bytes:
    return self._ctx.finalize()


def new_hash(hfunc):
  """Instantiate a fresh hash object from any of the accepted hash selectors."""
  if isinstance(hfunc, hashes.HashAlgorithm):
    return CryptographyHash(hfunc)
  if isinstance(hfunc, str):
    h = hashlib.new(hfunc)
  elif callable(hfunc):
    h = hfunc()
  else:
    raise TypeError(f"Unsupported hash function {hfunc!r}")
  # Extendable output functions (shake_128, shake_256) need a digest length
  if getattr(h, "digest_size", None) == 0:
    raise ValueError(f"Unsupported hash function {hfunc!r}: variable length output")
  return h


def challenge(hfunc, R, A, message: bytes) -> int:
  """The Fiat-Shamir challenge H(R.X || R.Y || A.X || A.Y || message) as a big endian integer"""
  data = bytes(R) + bytes(A) + bytes(message)
  h = new_hash(hfunc)
  try:
    h.update(data)
  except Exception as e:
    raise HashWriteError(f"Hash function rejected the challenge input: {e}") from e
  return int.from_bytes(h.digest(), "big")
