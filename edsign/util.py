import os
import re
from base64 import b64decode, b64encode


def armor_decode(data: str) -> bytes:
  """Base64 decode, tolerating missing padding and surrounding whitespace."""
  data = data.replace('\r\n', '\n').strip('\uFEFF`> \t\n')
  if not data.isascii():
    raise ValueError("Invalid armored encoding: data is not ASCII/Base64")
  data = "".join(data.split())
  if not re.fullmatch("[A-Za-z0-9+/]*", data):
    raise ValueError("Invalid armored encoding: unrecognized data")
  padding = -len(data) % 4
  if padding == 3:
    raise ValueError("Invalid armored encoding: invalid length for Base64 sequence")
  return b64decode(data + padding*'=', validate=True)


def armor_encode(data: bytes) -> str:
  """Base64 without the padding nonsense."""
  return b64encode(data).decode().rstrip('=')


def read_token(arg: str) -> str:
  """Keys and signatures may be given directly or as a filename."""
  if os.path.isfile(arg):
    with open(arg) as f:
      return f.read()
  return arg
