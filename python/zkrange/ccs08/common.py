"""Algebra shared by the set membership and bounded range proofs"""

from ..ecc import EllipticCurve
from ..errors import MalformedProofError
from ..transcript import FiatShamirTranscript


def blind_signature(curve: str, sig, v: int, s: int, t: int):
    """
    Randomize signature `sig` by `v` and compute the pairing commitment
    `a = e(G1, V)^(-s) * e(G1, G2)^t`
    """
    E = EllipticCurve(curve)
    V = sig * v
    a = E.pairing(E.G1(), V) ** (-s) * E.base_pairing() ** t
    return V, a


def check_signature(curve: str, public_key, V, a, c: int, zsig: int, zv: int) -> bool:
    """
    Check `a == e(pk, V)^c * e(G1, V)^(-zsig) * e(G1, G2)^zv`,
    merging the first two pairings by bilinearity
    """
    E = EllipticCurve(curve)
    p = E.pairing(public_key * c - E.G1() * zsig, V) * E.base_pairing() ** zv
    return p == a


def derive_challenge(label: bytes, a: list, D, order: int) -> int:
    """Fiat-Shamir challenge over every pairing commitment and the opening `D`"""
    transcript = FiatShamirTranscript(label, order)
    transcript.append(list(a))
    transcript.append(D)
    return transcript.get_challenge_scalar()


def response(blinding: int, secret: int, c: int, order: int) -> int:
    """Linear response `blinding - secret * c` mod `order`"""
    return (blinding - secret * c) % order


def scalars_in_range(order: int, *scalars) -> bool:
    """Responses and challenges are only accepted in reduced form"""
    return all(isinstance(z, int) and 0 <= z < order for z in scalars)


def ensure_parameters(params, params_type):
    if params is None:
        raise MalformedProofError("Parameters are required")
    if not isinstance(params, params_type):
        raise MalformedProofError(
            f"Expected {params_type.__name__}, got {type(params).__name__}"
        )


def ensure_well_formed(proof, params, proof_type, params_type):
    ensure_parameters(params, params_type)
    if proof is None:
        raise MalformedProofError("Proof is required")
    if not isinstance(proof, proof_type):
        raise MalformedProofError(f"Expected {proof_type.__name__}, got {type(proof).__name__}")
    if proof.C.name != params.curve:
        raise MalformedProofError("Proof and parameters use different curves")
