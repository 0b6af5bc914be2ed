"""Trusted setup module of the CCS08 protocol"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from structlog import get_logger

from ..constant import H_SCALAR, DEFAULT_CURVE
from ..ecc import EllipticCurve, Point
from ..errors import ConfigurationError
from .. import signature

logger = get_logger()


@dataclass(frozen=True)
class SetParameters:
    """Public parameters for proving membership in a finite set"""

    signatures: Mapping[int, Point]
    H: Point
    public_key: Point
    curve: str = DEFAULT_CURVE


@dataclass(frozen=True)
class BoundedParameters:
    """Public parameters for proving membership in `[0, u^l)`"""

    signatures: Mapping[int, Point]
    H: Point
    public_key: Point
    u: int
    l: int
    curve: str = DEFAULT_CURVE

    @property
    def upper(self) -> int:
        return self.u**self.l


def generator_h(curve: str = DEFAULT_CURVE) -> Point:
    """Return the pinned second generator `H` of G2"""
    E = EllipticCurve(curve)
    return E.G2() * H_SCALAR


class TrustedSetup:
    """
    Trusted setup object. It owns the signing key, which never leaves it:
    the parameters it produces only carry the verification key.

    Args:
        curve: `BN254` or `BLS12_381`
        rng: random source with a `randint(a, b)` method, defaults to `SystemRandom`
    """

    def __init__(self, curve: str = DEFAULT_CURVE, rng=None):
        self.curve = curve
        self.E = EllipticCurve(curve)
        self.keypair = signature.keygen(curve, rng)
        self.log = logger.new(curve=curve)

    def _sign_all(self, values: Iterable[int]) -> Mapping[int, Point]:
        signatures = {}
        for value in values:
            signatures[value] = signature.sign(value, self.keypair)
        return MappingProxyType(signatures)

    def setup_set(self, values: Iterable[int]) -> SetParameters:
        """Sign every admissible value of the set"""
        signatures = self._sign_all(set(values))
        self.log.debug("set parameters generated", size=len(signatures))

        return SetParameters(
            signatures, generator_h(self.curve), self.keypair.public_key, self.curve
        )

    def setup_bounded(self, u: int, l: int) -> BoundedParameters:
        """Sign every digit of base `u` for proofs over `[0, u^l)`"""
        if u < 2:
            raise ConfigurationError(f"Digit base must be at least 2, got {u}")
        if l < 1:
            raise ConfigurationError(f"Digit count must be positive, got {l}")

        signatures = self._sign_all(range(u))
        self.log.debug("bounded parameters generated", u=u, l=l)

        return BoundedParameters(
            signatures, generator_h(self.curve), self.keypair.public_key, u, l, self.curve
        )


def setup_set(values: Iterable[int], curve: str = DEFAULT_CURVE, rng=None) -> SetParameters:
    """Generate set parameters under a fresh key which is discarded afterwards"""
    return TrustedSetup(curve, rng).setup_set(values)


def setup_bounded(u: int, l: int, curve: str = DEFAULT_CURVE, rng=None) -> BoundedParameters:
    """Generate `[0, u^l)` parameters under a fresh key which is discarded afterwards"""
    return TrustedSetup(curve, rng).setup_bounded(u, l)


def check_signatures(params) -> bool:
    """
    Check every signature of the parameters against their public key,
    for provers that want to audit a trusted setup
    """
    return all(
        signature.verify(value, sig, params.public_key, params.curve)
        for value, sig in params.signatures.items()
    )
