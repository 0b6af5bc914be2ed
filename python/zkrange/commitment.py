from .ecc import EllipticCurve


class Pedersen:
    """
    Pedersen commitment `G2 * x + H * r` over the G2 group

    Args:
        H: second G2 generator with unknown discrete log to `G2`
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, H, curve: str = "BN254"):
        self.E = EllipticCurve(curve)
        self.order = self.E.order
        self.G = self.E.G2()
        self.H = H

    def commit(self, x: int, r: int):
        return self.G * (x % self.order) + self.H * (r % self.order)

    def open(self, commitment, x: int, r: int) -> bool:
        return commitment == self.commit(x, r)
