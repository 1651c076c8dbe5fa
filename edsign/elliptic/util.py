import nacl.bindings as sodium

# Field elements and scalars are always stored in this many bytes
FE_SIZE = 32


def clamp_scalar(b: bytes) -> bytes:
  """
  Clamp 32 bytes of hashed seed and return them as a big endian scalar.

  The hash output is read little endian as in RFC 8032 and clamped to 01[x]000
  (low three bits cleared, bit 255 cleared, bit 254 set). The scalar is then
  stored big endian, so the bytes come out reversed: the lowest byte of the
  result has its three low bits clear and the first byte is 01xxxxxx.
  """
  if len(b) != FE_SIZE: raise ValueError("Should be exactly 32 bytes")
  h = bytearray(b)
  h[0] &= 0xF8
  h[31] &= 0x7F
  h[31] |= 0x40
  return bytes(reversed(h))


def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != FE_SIZE: raise ValueError("Should be exactly 32 bytes")
  return int.from_bytes(x, "big")

def tobytes(x: int) -> bytes:
  return x.to_bytes(FE_SIZE, "big")

def blake(s) -> bytes:
  """Return BLAKE2b-512 digest, the fixed hash for seeds and blinding factors"""
  return sodium.crypto_generichash_blake2b_salt_personal(bytes(s), digest_size=64)

def consteq(a: bytes, b: bytes) -> bool:
  """Compare in constant time (given equal lengths)"""
  return sodium.sodium_memcmp(bytes(a), bytes(b))
