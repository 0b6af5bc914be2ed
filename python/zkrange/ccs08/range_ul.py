"""
Range proof of CCS08 for the interval `[0, u^l)`

The secret is written with `l` digits of base `u` and every digit gets a set
membership proof against the signed digit alphabet. All digit proofs share one
commitment, one opening `D` and one challenge, which binds them to the same
secret.
"""

from dataclasses import dataclass

from joblib import Parallel, delayed
from structlog import get_logger

from ..commitment import Pedersen
from ..constant import BOUNDED_RANGE_LABEL
from ..ecc import EllipticCurve, GtElement, Point
from ..errors import DomainError, MalformedProofError
from ..utils import decompose, get_n_jobs, get_random_int
from .common import (
    blind_signature,
    check_signature,
    derive_challenge,
    ensure_parameters,
    ensure_well_formed,
    response,
    scalars_in_range,
)
from .setup import BoundedParameters

logger = get_logger()


@dataclass(frozen=True)
class DigitProof:
    V: Point
    a: GtElement
    zsig: int
    zv: int


@dataclass(frozen=True)
class BoundedRangeProof:
    digits: tuple[DigitProof, ...]
    D: Point
    C: Point
    c: int
    zr: int


def prove_bounded(x: int, r: int, params: BoundedParameters, rng=None) -> BoundedRangeProof:
    """
    Prove that the value `x` committed with randomness `r` lies in `[0, u^l)`
    """
    ensure_parameters(params, BoundedParameters)

    digits = decompose(x, params.u, params.l)

    E = EllipticCurve(params.curve)
    order = E.order

    signatures = []
    for d in digits:
        sig = params.signatures.get(d)
        if sig is None:
            raise DomainError(f"Digit {d} has no signature")
        signatures.append(sig)

    m = get_random_int(order - 1, rng)
    v = [get_random_int(order - 1, rng) for _ in range(params.l)]
    s = [get_random_int(order - 1, rng) for _ in range(params.l)]
    t = [get_random_int(order - 1, rng) for _ in range(params.l)]

    commitments = Parallel(n_jobs=get_n_jobs())(
        delayed(blind_signature)(params.curve, signatures[i], v[i], s[i], t[i])
        for i in range(params.l)
    )
    V = [commitment[0] for commitment in commitments]
    a = [commitment[1] for commitment in commitments]

    # D = H^m * prod(G^(s_i * u^i))
    D = params.H * m
    for i in range(params.l):
        D = D + E.G2() * (s[i] * params.u**i % order)

    C = Pedersen(params.H, params.curve).commit(x, r)

    c = derive_challenge(BOUNDED_RANGE_LABEL, a, D, order)

    digit_proofs = tuple(
        DigitProof(
            V=V[i],
            a=a[i],
            zsig=response(s[i], digits[i], c, order),
            zv=response(t[i], v[i], c, order),
        )
        for i in range(params.l)
    )

    logger.debug("bounded range proof generated", curve=params.curve, u=params.u, l=params.l)
    return BoundedRangeProof(
        digits=digit_proofs, D=D, C=C, c=c, zr=response(m, r, c, order)
    )


def verify_bounded(proof: BoundedRangeProof, params: BoundedParameters) -> bool:
    """
    Verify a `[0, u^l)` range proof against the bounded parameters
    """
    ensure_well_formed(proof, params, BoundedRangeProof, BoundedParameters)
    if len(proof.digits) != params.l:
        raise MalformedProofError(
            f"Expected {params.l} digit proofs, got {len(proof.digits)}"
        )

    E = EllipticCurve(params.curve)
    order = E.order

    scalars = [proof.c, proof.zr]
    for digit in proof.digits:
        scalars += [digit.zsig, digit.zv]
    if not scalars_in_range(order, *scalars):
        return False

    # c must be the hash of every digit commitment and the opening
    a = [digit.a for digit in proof.digits]
    challenge_ok = proof.c == derive_challenge(BOUNDED_RANGE_LABEL, a, proof.D, order)

    # D == C^c * H^zr * prod(G^(zsig_i * u^i))
    D = proof.C * proof.c + params.H * proof.zr
    for i, digit in enumerate(proof.digits):
        D = D + E.G2() * (digit.zsig * params.u**i % order)
    opening_ok = D == proof.D

    checks = Parallel(n_jobs=get_n_jobs())(
        delayed(check_signature)(
            params.curve, params.public_key, digit.V, digit.a, proof.c, digit.zsig, digit.zv
        )
        for digit in proof.digits
    )

    result = challenge_ok and opening_ok and all(checks)
    logger.debug(
        "bounded range proof verified", curve=params.curve, u=params.u, l=params.l, result=result
    )
    return result
