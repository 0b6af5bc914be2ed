from enum import Enum
from functools import lru_cache
from typing import Union

from py_ecc import optimized_bls12_381, optimized_bn128
from py_ecc.fields import (
    optimized_bn128_FQ,
    optimized_bn128_FQ2,
    optimized_bn128_FQ12,
    optimized_bls12_381_FQ,
    optimized_bls12_381_FQ2,
    optimized_bls12_381_FQ12,
)


class CurveType(Enum):
    BN128 = optimized_bn128
    BN254 = optimized_bn128
    ALT_BN128 = optimized_bn128
    BLS12_381 = optimized_bls12_381


class CurveFQ(Enum):
    BN128 = optimized_bn128_FQ
    BN254 = optimized_bn128_FQ
    ALT_BN128 = optimized_bn128_FQ
    BLS12_381 = optimized_bls12_381_FQ


class CurveFQ2(Enum):
    BN128 = optimized_bn128_FQ2
    BN254 = optimized_bn128_FQ2
    ALT_BN128 = optimized_bn128_FQ2
    BLS12_381 = optimized_bls12_381_FQ2


class CurveFQ12(Enum):
    BN128 = optimized_bn128_FQ12
    BN254 = optimized_bn128_FQ12
    ALT_BN128 = optimized_bn128_FQ12
    BLS12_381 = optimized_bls12_381_FQ12


class CurveCoordinateSize(Enum):
    """Size in bytes of one base field element"""

    BN128 = 32
    BN254 = 32
    ALT_BN128 = 32
    BLS12_381 = 48


def ispointG1(x):
    return isinstance(x, Point) and x.group == 1


def ispointG2(x):
    return isinstance(x, Point) and x.group == 2


def isgt(x):
    return isinstance(x, GtElement)


class EllipticCurve:
    def __init__(self, curve: str):
        if curve not in CurveType.__members__:
            raise ValueError(f"Unsupported curve: {curve}")

        self.name = curve
        self.curve = CurveType[curve].value.optimized_curve
        self.order = self.curve.curve_order
        self.field_modulus = self.curve.field_modulus
        self.__pairing = CurveType[curve].value.optimized_pairing.pairing

    def G1(self):
        """
        Return generator G1 of the curve
        """
        x, y, z = self.curve.G1
        return Point(x, y, z, self.name, False)

    def G2(self):
        """
        Return generator G2 of the curve
        """
        x, y, z = self.curve.G2
        return Point(x, y, z, self.name, False)

    def pairing(self, a, b):
        """
        Compute pairing, that is `e(a, b)`, where `a in G1` and `b in G2`
        """
        if not ispointG1(a) or not ispointG2(b):
            raise TypeError("Pairing expects a G1 point and a G2 point")

        return GtElement(self.__pairing(b.point, a.point), self.name)

    def base_pairing(self):
        """
        Return `e(G1, G2)`, computed once per curve and process
        """
        return _base_pairing(self.name)

    def from_bytes(self, b: bytes):
        """
        Construct G1 or G2 point from its canonical encoding
        """
        n = CurveCoordinateSize[self.name].value

        if len(b) == n * 2:
            coords = [int.from_bytes(b[i : i + n], "big") for i in range(0, n * 2, n)]
            self._check_coordinates(coords)
            if not any(coords):
                return self.G1() * 0
            return Point(coords[0], coords[1], 1, self.name)
        elif len(b) == n * 4:
            coords = [int.from_bytes(b[i : i + n], "big") for i in range(0, n * 4, n)]
            self._check_coordinates(coords)
            if not any(coords):
                return self.G2() * 0
            return Point((coords[0], coords[1]), (coords[2], coords[3]), (1, 0), self.name)
        else:
            raise ValueError(
                f"Encoding size of {n * 2} or {n * 4} expected, got {len(b)}"
            )

    def _check_coordinates(self, coords):
        if any(c >= self.field_modulus for c in coords):
            raise ValueError("Coordinate is not reduced modulo the field modulus")


@lru_cache(maxsize=None)
def _base_pairing(curve: str):
    E = EllipticCurve(curve)
    return E.pairing(E.G1(), E.G2())


class Point:
    def __init__(
        self,
        x: Union[int, tuple[int, int]],
        y: Union[int, tuple[int, int]],
        z: Union[int, tuple[int, int]],
        crv: str,
        verify=True,
    ):
        self.name = crv
        self.curve = CurveType[crv].value.optimized_curve
        fq = CurveFQ[crv].value
        fq2 = CurveFQ2[crv].value

        if (
            isinstance(x, (tuple, list))
            and isinstance(y, (tuple, list))
            and isinstance(z, (tuple, list))
        ):
            self.point = (fq2(x), fq2(y), fq2(z))
            if verify and not self.curve.is_on_curve(self.point, self.curve.b2):
                raise ValueError("Point is not on the curve")
        elif isinstance(x, int) and isinstance(y, int) and isinstance(z, int):
            self.point = (fq(x), fq(y), fq(z))
            if verify and not self.curve.is_on_curve(self.point, self.curve.b):
                raise ValueError("Point is not on the curve")
        else:
            # this point is not checked since it will come from internal arithmetic function
            self.point = (x, y, z)

        self.group = 2 if isinstance(self.point[0], fq2) else 1

    def __getstate__(self):
        # curve modules are not picklable, rebuild them from the name
        return {"name": self.name, "point": self.point, "group": self.group}

    def __setstate__(self, state):
        self.__dict__.update(state)
        self.curve = CurveType[self.name].value.optimized_curve

    def _wrap(self, result):
        return Point(result[0], result[1], result[2], self.name, False)

    def __add__(self, other):
        if not isinstance(other, Point) or other.group != self.group:
            raise TypeError(
                f"Addition of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.add(self.point, other.point))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return self.__add__(-other)

    def __mul__(self, other):
        if not isinstance(other, int):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.multiply(self.point, other % self.curve.curve_order))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self._wrap(self.curve.neg(self.point))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __str__(self) -> str:
        if self.is_zero():
            return "Point(infinity)"
        return f"{self.curve.normalize(self.point)}"

    def __repr__(self) -> str:
        return self.__str__()

    def is_zero(self) -> bool:
        return self.curve.is_inf(self.point)

    def to_bytes(self) -> bytes:
        """Canonical encoding, all-zero for the point at infinity"""
        n = CurveCoordinateSize[self.name].value

        if self.is_zero():
            return bytes(n * 2 * self.group)

        x, y = self.curve.normalize(self.point)
        if self.group == 1:
            coords = [int(x), int(y)]
        else:
            coords = [int(c) for c in x.coeffs] + [int(c) for c in y.coeffs]

        return b"".join(c.to_bytes(n, "big") for c in coords)


class GtElement:
    """
    Element of the pairing target group, written multiplicatively
    """

    def __init__(self, value, crv: str):
        self.name = crv
        self.value = value
        self.order = CurveType[crv].value.optimized_curve.curve_order

    @classmethod
    def from_bytes(cls, b: bytes, crv: str):
        n = CurveCoordinateSize[crv].value
        if len(b) != n * 12:
            raise ValueError(f"Encoding size of {n * 12} expected, got {len(b)}")

        coeffs = [int.from_bytes(b[i : i + n], "big") for i in range(0, n * 12, n)]
        return GtElement(CurveFQ12[crv].value(coeffs), crv)

    def __mul__(self, other):
        if not isinstance(other, GtElement):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )
        return GtElement(self.value * other.value, self.name)

    def __pow__(self, other):
        if not isinstance(other, int):
            raise TypeError(f"Exponent must be an integer, got {type(other)}")
        # Gt has prime order, so negative exponents reduce to inverses
        return GtElement(self.value ** (other % self.order), self.name)

    def inverse(self):
        return GtElement(self.value.inv(), self.name)

    def __eq__(self, other):
        if not isinstance(other, GtElement):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"GtElement({self.to_bytes().hex()[:16]}...)"

    def to_bytes(self) -> bytes:
        n = CurveCoordinateSize[self.name].value
        p = CurveType[self.name].value.optimized_curve.field_modulus
        return b"".join((int(c) % p).to_bytes(n, "big") for c in self.value.coeffs)
