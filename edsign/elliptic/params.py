from dataclasses import dataclass

from .ed import EdPoint, TwistedEdwards


@dataclass(frozen=True)
class CurveParams:
  """Domain parameters: prime order base point and the cofactor of the full group"""
  name: str
  base: EdPoint
  order: int
  cofactor: int

  @property
  def curve(self) -> TwistedEdwards:
    return self.base.curve


# Twisted Edwards curve on the scalar field of BN254 (aka Baby Jubjub)
bn254 = TwistedEdwards(
  "bn254",
  p=21888242871839275222246405745257275088548364400416034343698204186575808495617,
  a=168700,
  d=168696,
)

BN254 = CurveParams(
  "bn254",
  base=bn254.point(
    5299619240641551281634865583518297030282874472190772894086521144482721001553,
    16950150798460657717958625567821834550301663161624707787222815936182638968203,
  ),
  order=2736030358979909402780800718157159386076813972158567259200215660948447373041,
  cofactor=8,
)

# Ed25519, with big endian X || Y encoding rather than the RFC 8032 one
p25519 = 2**255 - 19
ed25519 = TwistedEdwards("ed25519", p=p25519, a=-1, d=-121665 * pow(121666, p25519 - 2, p25519))

ED25519 = CurveParams(
  "ed25519",
  base=ed25519.point(
    15112221349535400772501151409588531511454012693041857206046113283949847762202,
    46316835694926478169428394003475163141307993866256225615783033603165251855960,
  ),
  order=2**252 + 27742317777372353535851937790883648493,
  cofactor=8,
)

CURVES = {params.name: params for params in (BN254, ED25519)}
