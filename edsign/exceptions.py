class InvalidPointError(ValueError):
  """A point is not on the curve (corrupted input or a broken curve engine)"""

class HashWriteError(RuntimeError):
  """The challenge hash function rejected its input"""

class MalformedKeyError(ValueError):
  """Key bytes or key string is malformed"""

class MalformedSignatureError(ValueError):
  """Signature bytes or string is malformed"""
