from enum import Enum
from typing import Union
from joblib import Parallel, delayed
from py_ecc import optimized_bls12_381, optimized_bn128

from .utils import get_random_int, get_n_jobs


class CurveType(Enum):
    BN128 = optimized_bn128
    BN254 = optimized_bn128
    ALT_BN128 = optimized_bn128
    BLS12_381 = optimized_bls12_381


class EllipticCurve:
    """
    Pairing-friendly curve context: scalar field order, G1/G2 generators,
    identities and the pairing `e: G1 x G2 -> GT`.

    Args:
        curve: `BN254` (alias `BN128`, `ALT_BN128`) or `BLS12_381`
    """

    def __init__(self, curve: str = "BN254"):
        self.name = curve
        self.curve = CurveType[curve].value.optimized_curve
        self.order = self.curve.curve_order
        self.__pairing = CurveType[curve].value.optimized_pairing.pairing

    def G1(self):
        """
        Return generator G1 of the curve
        """
        return Point(self.curve.G1, "G1", self.name)

    def G2(self):
        """
        Return generator G2 of the curve
        """
        return Point(self.curve.G2, "G2", self.name)

    def Z1(self):
        """
        Return identity (point at infinity) of G1
        """
        return Point(self.curve.Z1, "G1", self.name)

    def Z2(self):
        """
        Return identity (point at infinity) of G2
        """
        return Point(self.curve.Z2, "G2", self.name)

    def random_scalar(self) -> int:
        """Sample scalar in [1, order - 1] from a secure source"""
        return get_random_int(self.order - 1)

    def is_on_curve(self, a) -> bool:
        """Check that point `a` lies on the curve of its group"""
        b = self.curve.b if a.group == "G1" else self.curve.b2
        return self.curve.is_on_curve(a.point, b)

    def pairing(self, a, b):
        """
        Compute pairing, that is `e(a, b)`, where `a in G1` and `b in G2`
        """
        if not isinstance(a, Point) or a.group != "G1":
            raise TypeError(f"Left pairing argument must be a G1 point, got {a!r}")
        if not isinstance(b, Point) or b.group != "G2":
            raise TypeError(f"Right pairing argument must be a G2 point, got {b!r}")
        if a.name != self.name or b.name != self.name:
            raise TypeError(f"Pairing arguments must be {self.name} points")
        if not self.is_on_curve(a) or not self.is_on_curve(b):
            raise ValueError("Pairing argument is not on the curve")

        # py_ecc takes the G2 point first
        return self.__pairing(b.point, a.point)

    def multi_pairing(self, a: list, b: list):
        """
        Perform pairing of e(a[i], b[i]) in batch
        and compute its product
        """
        if len(a) != len(b):
            raise ValueError("Length of a and b must be equal")
        if not a:
            raise ValueError("Pairing product of no points is not supported")

        result = self.pairing(a[0], b[0])
        for x, y in zip(a[1:], b[1:]):
            result = result * self.pairing(x, y)

        return result

    def batch_mul(self, g, s):
        """
        Perform EC multiplication in parallel batch
        where g is Elliptic Curve point(s) and s is scalars
        """
        if not isinstance(g, list):
            g = [g] * len(s)

        if len(g) != len(s):
            raise ValueError("Length of points and scalars must be equal")

        return Parallel(n_jobs=get_n_jobs())(
            delayed(_scalar_mul)(point, scalar) for point, scalar in zip(g, s)
        )

    def multiexp(self, g: list, s: list, zero=None):
        """
        Perform Multi-Scalar-Multiplication (MSM)
        to compute sum of g[i] * s[i] where g is
        Elliptic Curve point and s is scalar
        """
        if len(g) != len(s):
            raise ValueError(
                f"Length of points ({len(g)}) and scalars ({len(s)}) must be equal"
            )

        if len(g) == 0:
            if zero is None:
                raise ValueError("Empty multiexp requires an explicit zero point")
            return zero

        total = g[0].zero() if zero is None else zero
        for point, scalar in zip(g, s):
            total = total + point * scalar

        return total


def _scalar_mul(point, scalar):
    return point * scalar


class Point:
    """
    Immutable G1 or G2 point wrapping a `py_ecc` projective point

    Args:
        point: `(x, y, z)` projective coordinates
        group: `G1` or `G2`
        crv: curve name
    """

    def __init__(self, point: tuple, group: str, crv: str):
        self.name = crv
        self.group = group
        self.point = point

    @property
    def curve(self):
        # points are sent to joblib workers and must stay picklable
        return CurveType[self.name].value.optimized_curve

    def __new_point(self, point):
        return Point(point, self.group, self.name)

    def __check_compatible(self, other):
        if not isinstance(other, Point):
            raise TypeError(
                f"Addition of {type(self)} with {type(other)} is not allowed"
            )
        if other.group != self.group or other.name != self.name:
            raise TypeError(
                f"Addition of {self.name} {self.group} point "
                f"with {other.name} {other.group} point is not allowed"
            )

    def zero(self):
        """Return identity of the group of this point"""
        z = self.curve.Z1 if self.group == "G1" else self.curve.Z2
        return self.__new_point(z)

    def __add__(self, other):
        self.__check_compatible(other)
        return self.__new_point(self.curve.add(self.point, other.point))

    def __radd__(self, other):
        # allows sum() over points
        if isinstance(other, int) and other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other):
        self.__check_compatible(other)
        return self.__new_point(self.curve.add(self.point, self.curve.neg(other.point)))

    def __mul__(self, other: int):
        if not isinstance(other, int):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )

        return self.__new_point(
            self.curve.multiply(self.point, other % self.curve.curve_order)
        )

    def __rmul__(self, other: int):
        return self.__mul__(other)

    def __neg__(self):
        return self.__new_point(self.curve.neg(self.point))

    def __eq__(self, other: Union["Point", object]):
        if not isinstance(other, Point):
            return NotImplemented
        if other.group != self.group or other.name != self.name:
            return False
        return self.curve.eq(self.point, other.point)

    __hash__ = None

    def is_zero(self) -> bool:
        return self.curve.is_inf(self.point)

    def __str__(self) -> str:
        if self.is_zero():
            return f"{self.group}(inf)"
        return f"{self.group}{self.curve.normalize(self.point)}"

    def __repr__(self) -> str:
        return self.__str__()
