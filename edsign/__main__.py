import sys
from typing import NoReturn

import colorama

import edsign
from edsign import eddsa
from edsign.elliptic import CURVES
from edsign.keys import PrivateKey, PublicKey, Signature
from edsign.util import armor_decode, armor_encode, read_token

hdrhelp = """\
Usage:
  edsign keygen [-s SEEDHEX] - print a new secret key
  edsign pubkey -i SKEY - print the public key of a secret key
  edsign sign -i SKEY [file] - print a signature of file (or stdin)
  edsign verify -p PKEY -S SIG [file] - verify a signature of file (or stdin)
"""

opthelp = """\
  -i SKEY           Secret key (string token or file)
  -p PKEY           Public key (string token or file)
  -S SIG            Signature (string token or file)
  -s SEEDHEX        Derive the key from a 32-byte hex seed instead of random
  --hash NAME       Challenge hash function (default sha256)
  --curve NAME      Domain parameters: bn254 (default) or ed25519
"""

cmdhelp = f"""\
Edsign {edsign.__version__} - EdDSA signatures on the BN254 twisted Edwards curve

{hdrhelp}
{opthelp}"""


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.identities = []
    self.pubkeys = []
    self.signatures = []
    self.seed = ""
    self.hash = "sha256"
    self.curve = "bn254"
    self.debug = None


common = dict(
  hash='--hash'.split(),
  curve='--curve'.split(),
  debug='--debug'.split(),
)

keygenargs = dict(seed='-s --seed'.split(), **common)
pubkeyargs = dict(identities='-i --identity'.split(), **common)
signargs = dict(identities='-i --identity'.split(), **common)
verifyargs = dict(pubkeys='-p --pubkey'.split(), signatures='-S --signature'.split(), **common)


def main_keygen(args):
  seed = bytes.fromhex(args.seed) if args.seed else None
  pk, sk = eddsa.generate_key(seed, args.params)
  print(armor_encode(bytes(sk)))


def main_pubkey(args):
  sk = load_sk(args)
  print(armor_encode(bytes(sk.public)))


def main_sign(args):
  sk = load_sk(args)
  sig = eddsa.sign(sk, read_message(args), args.hash, args.params)
  print(armor_encode(bytes(sig)))


def main_verify(args):
  if len(args.pubkeys) != 1 or len(args.signatures) != 1:
    raise ValueError("Exactly one public key and one signature are needed")
  pk = PublicKey.from_bytes(armor_decode(read_token(args.pubkeys[0])), args.params)
  sig = Signature.from_bytes(armor_decode(read_token(args.signatures[0])), args.params)
  if not eddsa.verify(sig, read_message(args), pk, args.hash, args.params):
    raise ValueError("Signature mismatch")
  sys.stderr.write(" ✅  Signature verified\n")


def load_sk(args) -> PrivateKey:
  if len(args.identities) != 1:
    raise ValueError("Exactly one secret key is needed")
  return PrivateKey.from_bytes(armor_decode(read_token(args.identities[0])), args.params)


def read_message(args) -> bytes:
  if len(args.files) > 1:
    raise ValueError("Only one file may be signed or verified at a time")
  if not args.files or args.files[0] is True:
    return sys.stdin.buffer.read()
  with open(args.files[0], "rb") as f:
    return f.read()


modes = {
  "keygen": (main_keygen, keygenargs),
  "pubkey": (main_pubkey, pubkeyargs),
  "sign": (main_sign, signargs),
  "verify": (main_verify, verifyargs),
}


def argparse():
  # Custom parsing: flags with parameters, everything else is a file
  av = sys.argv[1:]
  if not av or any(a.lower() in ('-h', '--help') for a in av):
    first, rest = cmdhelp.rstrip().split('\n', 1)
    if sys.stdout.isatty():
      print(f'\x1B[1;44m{first:78}\x1B[0m\n{rest}')
    else:
      print(f'{first}\n{rest}')
    sys.exit(0)
  if any(a.lower() in ('-v', '--version') for a in av):
    print(cmdhelp.split('\n')[0])
    sys.exit(0)
  args = Args()
  if av[0] not in modes:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/pubkey/sign/verify).\n')
    sys.exit(1)
  args.mode = av[0]
  ad = modes[args.mode][1]

  aiter = iter(av[1:])
  for a in aiter:
    if a == '-':
      args.files.append(True)
      continue
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    argvar = next((k for k, v in ad.items() if a in v), None)
    if argvar is None:
      sys.stderr.write(f'{hdrhelp}\n 💣  Unknown argument: edsign {args.mode} {a}\n')
      sys.exit(1)
    try:
      var = getattr(args, argvar)
      if isinstance(var, list):
        var.append(next(aiter))
      elif isinstance(var, str):
        setattr(args, argvar, next(aiter))
      else:
        setattr(args, argvar, True)
    except StopIteration:
      sys.stderr.write(f'{hdrhelp}\n 💣  Argument parameter missing: edsign {args.mode} {a} …\n')
      sys.exit(1)

  if args.curve not in CURVES:
    sys.stderr.write(f' 💣  Unknown curve {args.curve!r}, choose from {", ".join(CURVES)}\n')
    sys.exit(1)
  args.params = CURVES[args.curve]
  return args


def main() -> NoReturn:
  """
  The main CLI entry point.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid keys, signature mismatch or other errors in the input

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()
  func = modes[args.mode][0]
  if args.debug:
    func(args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    func(args)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
