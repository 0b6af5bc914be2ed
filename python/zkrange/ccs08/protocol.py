import math
from dataclasses import dataclass
from typing import Optional

from structlog import get_logger

from ..constant import DEFAULT_CURVE, MAX_DIGIT_BASE
from ..ecc import EllipticCurve
from ..errors import ConfigurationError, MalformedProofError
from ..utils import Timer, count_digits
from .range_ul import BoundedRangeProof, prove_bounded, verify_bounded
from .setup import BoundedParameters, setup_bounded

logger = get_logger()


@dataclass(frozen=True)
class RangeProof:
    """
    Proof that a committed value lies in `[a, b]`

    `low` proves `x - a` and `high` proves `x - b - 1 + u^l`, both in `[0, u^l)`
    """

    low: BoundedRangeProof
    high: BoundedRangeProof


def derive_digit_base(b: int) -> int:
    """Digit base of roughly `b / log(b)`, clamped to `[2, MAX_DIGIT_BASE]`"""
    logb = int(math.log(b))
    u = b // logb if logb > 0 else b
    return max(2, min(u, MAX_DIGIT_BASE))


class CCS08:
    """
    CCS08 range proof for an arbitrary interval (https://eprint.iacr.org/2008/421)

    Args:
        curve: `BN254` or `BLS12_381`
        rng: random source with a `randint(a, b)` method, defaults to `SystemRandom`
    """

    def __init__(self, curve: str = DEFAULT_CURVE, rng=None):
        self.E = EllipticCurve(curve)
        self.curve = curve
        self.rng = rng
        self.order = self.E.order

        self.params: Optional[BoundedParameters] = None
        self.a = None
        self.b = None
        self.log = logger.new(curve=curve)

    def setup(self, a: int, b: int, u: Optional[int] = None):
        """
        Trusted setup for the interval `[a, b]`, with `u` the digit base
        """
        if a > b:
            raise ConfigurationError("a must be less than or equal to b")
        if b <= 0:
            raise ConfigurationError("b must be positive")

        if u is None:
            u = derive_digit_base(b)
        if u < 2:
            raise ConfigurationError(f"Digit base must be at least 2, got {u}")

        # u^l > b and u^l > b - a
        l = count_digits(max(b, b - a), u)

        self.params = setup_bounded(u, l, self.curve, self.rng)
        self.a = a
        self.b = b
        self.log.debug("range parameters generated", a=a, b=b, u=u, l=l)
        return self.params

    def _ensure_setup(self):
        if self.params is None:
            raise ConfigurationError("Setup must be run before proving or verifying")

    def prove(self, x: int, r: int, rng=None) -> RangeProof:
        """
        Prove that the value `x` committed with randomness `r` lies in `[a, b]`
        """
        self._ensure_setup()
        rng = rng or self.rng
        upper = self.params.upper

        with Timer("ccs08 prove"):
            high = prove_bounded(x - self.b - 1 + upper, r, self.params, rng)
            low = prove_bounded(x - self.a, r, self.params, rng)

        return RangeProof(low=low, high=high)

    def verify(self, proof: RangeProof) -> bool:
        """
        Verify that both bounded proofs hold and refer to the same committed value
        """
        self._ensure_setup()
        if not isinstance(proof, RangeProof):
            raise MalformedProofError(f"Expected RangeProof, got {type(proof).__name__}")

        with Timer("ccs08 verify"):
            first = verify_bounded(proof.high, self.params)
            second = verify_bounded(proof.low, self.params)

            # same randomness cancels: C_high - C_low = G^(u^l - b - 1 + a)
            shift = self.params.upper - self.b - 1 + self.a
            linked = proof.high.C - proof.low.C == self.E.G2() * shift

        result = first and second and linked
        self.log.debug("range proof verified", result=result)
        return result

    def commitment(self, proof: RangeProof):
        """Commitment to `x` itself, `C_low * G^a`"""
        self._ensure_setup()
        return proof.low.C + self.E.G2() * self.a


def composer_setup(a: int, b: int, u: Optional[int] = None, curve: str = DEFAULT_CURVE, rng=None) -> CCS08:
    zkrp = CCS08(curve, rng)
    zkrp.setup(a, b, u)
    return zkrp


def composer_prove(state: CCS08, x: int, r: int) -> RangeProof:
    return state.prove(x, r)


def composer_verify(state: CCS08, proof: RangeProof) -> bool:
    return state.verify(proof)
