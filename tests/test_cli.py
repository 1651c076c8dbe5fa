import sys
from io import BytesIO, TextIOWrapper

import pytest

from edsign.__main__ import argparse, main
from edsign.eddsa import generate_key
from edsign.elliptic import BN254, ED25519
from edsign.util import armor_decode, armor_encode

ZERO_SEED_HEX = 64 * "0"


def test_argparser(capsys):
  sys.argv = "edsign sign -i key.sk --hash sha512 --curve ed25519 message.txt".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.identities == ["key.sk"]
  assert a.hash == "sha512"
  assert a.params is ED25519
  assert a.files == ["message.txt"]
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  sys.argv = "edsign verify -p PK -S SIG -- --notaflag".split()
  a = argparse()
  assert a.params is BN254
  assert a.hash == "sha256"
  assert a.files == ["--notaflag"]

  # Missing argument parameter
  sys.argv = "edsign sign -i".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert "Argument parameter missing: edsign sign -i …" in cap.err

  # Flags belong to their own commands
  sys.argv = "edsign keygen -i key.sk".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert "Unknown argument: edsign keygen -i" in cap.err


# A fixture to run edsign more easily, checks exitcode and returns its output
@pytest.fixture
def edsign(monkeypatch, capsys):
  def run_main(*args, stdin=b"", exitcode=0):
    sys.argv = [str(arg) for arg in ("edsign", *args)]
    monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(stdin)))  # Inject stdin
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but edsign did sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


def test_end_to_end(edsign, tmp_path):
  skfile = tmp_path / "key.sk"
  pkfile = tmp_path / "key.pub"
  sigfile = tmp_path / "message.sig"
  msgfile = tmp_path / "message.txt"
  msgfile.write_bytes(b"test")

  cap = edsign("keygen", "-s", ZERO_SEED_HEX)
  pk, sk = generate_key(bytes(32))
  assert armor_decode(cap.out) == bytes(sk)
  skfile.write_text(cap.out)

  cap = edsign("pubkey", "-i", skfile)
  assert armor_decode(cap.out) == bytes(pk)
  pkfile.write_text(cap.out)

  cap = edsign("sign", "-i", skfile, msgfile)
  sigfile.write_text(cap.out)

  cap = edsign("verify", "-p", pkfile, "-S", sigfile, msgfile)
  assert "Signature verified" in cap.err

  # Key and signature given as strings, message on stdin
  cap = edsign("verify", "-p", pkfile.read_text().strip(), "-S", sigfile, stdin=b"test")
  assert "Signature verified" in cap.err

  cap = edsign("verify", "-p", pkfile, "-S", sigfile, "-", stdin=b"Test", exitcode=10)
  assert "Error: Signature mismatch" in cap.err

  # The hash function must match
  cap = edsign("verify", "--hash", "sha512", "-p", pkfile, "-S", sigfile, msgfile, exitcode=10)
  assert "Error: Signature mismatch" in cap.err


def test_other_curve(edsign, tmp_path):
  cap = edsign("keygen", "--curve", "ed25519")
  sk = cap.out.strip()
  pk = edsign("pubkey", "--curve", "ed25519", "-i", sk).out.strip()
  sig = edsign("sign", "--curve", "ed25519", "--hash", "sha512", "-i", sk, stdin=b"hello").out.strip()
  cap = edsign("verify", "--curve", "ed25519", "--hash", "sha512", "-p", pk, "-S", sig, stdin=b"hello")
  assert "Signature verified" in cap.err
  # Ed25519 keys are no good on the default curve
  edsign("verify", "--hash", "sha512", "-p", pk, "-S", sig, stdin=b"hello", exitcode=10)


def test_errors(edsign):
  cap = edsign(exitcode=0)
  assert "Usage:" in cap.out
  cap = edsign("--version")
  assert cap.out.startswith("Edsign")

  cap = edsign("encrypt", exitcode=1)
  assert "Invalid or missing command" in cap.err

  cap = edsign("keygen", "--curve", "secp256k1", exitcode=1)
  assert "Unknown curve 'secp256k1'" in cap.err

  cap = edsign("keygen", "-s", "00", exitcode=10)
  assert "Error: Seed should be exactly 32 bytes" in cap.err

  cap = edsign("pubkey", "-i", "not base64!", exitcode=10)
  assert "Invalid armored encoding" in cap.err

  cap = edsign("pubkey", "-i", armor_encode(bytes(100)), exitcode=10)
  assert "Private key should be 128 bytes, got 100" in cap.err

  cap = edsign("sign", exitcode=10)
  assert "Exactly one secret key is needed" in cap.err

  cap = edsign("sign", "--hash", "nosuchhash", "-i", armor_encode(bytes(generate_key()[1])), stdin=b"x", exitcode=10)
  assert "Error:" in cap.err

  sk = armor_encode(bytes(generate_key(bytes(32))[1]))
  cap = edsign("sign", "--hash", "shake_128", "-i", sk, stdin=b"x", exitcode=10)
  assert "Error: Unsupported hash function 'shake_128': variable length output" in cap.err

  with pytest.raises(ValueError):
    edsign("keygen", "--debug", "-s", "00")


def test_armor():
  data = bytes(range(100))
  s = armor_encode(data)
  assert "=" not in s
  assert armor_decode(s) == data
  assert armor_decode(f"  {s}\n") == data
  assert armor_decode(s[:40] + "\n" + s[40:]) == data
  assert armor_decode("") == b""
  with pytest.raises(ValueError) as exc:
    armor_decode("a")
  assert "invalid length" in str(exc.value)
  with pytest.raises(ValueError):
    armor_decode("ÄÖ")
