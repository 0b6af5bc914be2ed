"""
Boneh-Boyen weak signatures (https://eprint.iacr.org/2004/171)

A message `m` is signed as `G2 * 1/(m + sk)` and the public key is `G1 * sk`,
so a valid signature satisfies `e(pk + G1 * m, sig) == e(G1, G2)`.
"""

from .ecc import EllipticCurve
from .errors import SignatureError
from .utils import get_random_int


class KeyPair:
    def __init__(self, secret_key: int, public_key, curve: str):
        self.secret_key = secret_key
        self.public_key = public_key
        self.curve = curve

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key}, curve={self.curve})"


def keygen(curve: str = "BN254", rng=None) -> KeyPair:
    E = EllipticCurve(curve)
    sk = get_random_int(E.order - 1, rng)
    return KeyPair(sk, E.G1() * sk, curve)


def sign(m: int, keypair: KeyPair):
    E = EllipticCurve(keypair.curve)

    exponent = (m + keypair.secret_key) % E.order
    if exponent == 0:
        raise SignatureError("Message cannot be signed with this key")

    return E.G2() * pow(exponent, -1, E.order)


def verify(m: int, signature, public_key, curve: str = "BN254") -> bool:
    E = EllipticCurve(curve)

    if signature.is_zero():
        return False

    return E.pairing(public_key + E.G1() * m, signature) == E.base_pairing()
