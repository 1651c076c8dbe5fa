# A plain Python reference engine for twisted Edwards curve arithmetic

# Not constant time, not zeroing buffers after use. The signature code only
# uses the operators (s * P, P + Q, ==, bytes(P)) and is_on_curve, so any other
# point type providing those can be passed in through CurveParams.

from .ed import EdPoint, TwistedEdwards
from .params import BN254, CURVES, ED25519, CurveParams, bn254, ed25519
from .util import FE_SIZE, blake, clamp_scalar, consteq, tobytes, toint
