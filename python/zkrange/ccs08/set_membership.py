"""Set membership proof of CCS08 (https://eprint.iacr.org/2008/421)"""

from dataclasses import dataclass

from structlog import get_logger

from ..commitment import Pedersen
from ..constant import SET_MEMBERSHIP_LABEL
from ..ecc import EllipticCurve, GtElement, Point
from ..errors import DomainError
from ..utils import get_random_int
from .common import (
    blind_signature,
    check_signature,
    derive_challenge,
    ensure_parameters,
    ensure_well_formed,
    response,
    scalars_in_range,
)
from .setup import SetParameters

logger = get_logger()


@dataclass(frozen=True)
class SetMembershipProof:
    V: Point
    D: Point
    C: Point
    a: GtElement
    c: int
    zr: int
    zsig: int
    zv: int


def prove_set(x: int, r: int, params: SetParameters, rng=None) -> SetMembershipProof:
    """
    Prove that the value `x` committed with randomness `r` belongs to the signed set
    """
    ensure_parameters(params, SetParameters)

    sig = params.signatures.get(x)
    if sig is None:
        raise DomainError("Element does not belong to the set")

    E = EllipticCurve(params.curve)
    order = E.order

    m = get_random_int(order - 1, rng)
    v = get_random_int(order - 1, rng)
    s = get_random_int(order - 1, rng)
    t = get_random_int(order - 1, rng)

    C = Pedersen(params.H, params.curve).commit(x, r)
    V, a = blind_signature(params.curve, sig, v, s, t)

    # D = H^m * G^s
    D = params.H * m + E.G2() * s

    c = derive_challenge(SET_MEMBERSHIP_LABEL, [a], D, order)

    proof = SetMembershipProof(
        V=V,
        D=D,
        C=C,
        a=a,
        c=c,
        zr=response(m, r, c, order),
        zsig=response(s, x, c, order),
        zv=response(t, v, c, order),
    )
    logger.debug("set membership proof generated", curve=params.curve)
    return proof


def verify_set(proof: SetMembershipProof, params: SetParameters) -> bool:
    """
    Verify a set membership proof against the set parameters
    """
    ensure_well_formed(proof, params, SetMembershipProof, SetParameters)

    E = EllipticCurve(params.curve)
    order = E.order

    if not scalars_in_range(order, proof.c, proof.zr, proof.zsig, proof.zv):
        return False

    # c must be the hash of the prover commitments
    challenge_ok = proof.c == derive_challenge(SET_MEMBERSHIP_LABEL, [proof.a], proof.D, order)

    # D == C^c * H^zr * G^zsig
    D = proof.C * proof.c + params.H * proof.zr + E.G2() * proof.zsig
    opening_ok = D == proof.D

    signature_ok = check_signature(
        params.curve, params.public_key, proof.V, proof.a, proof.c, proof.zsig, proof.zv
    )

    result = challenge_ok and opening_ok and signature_ok
    logger.debug("set membership proof verified", curve=params.curve, result=result)
    return result
