from typing import Union
from .ecc import Point
from .errors import DegreeMismatchError
from .utils import get_random_int


class PolynomialRing:
    def __init__(self, coeffs, p):
        """
        Initialize the polynomial with coefficients.

        coeffs: List of coefficients, where coeffs[i] is the coefficient of x^i.
        p: Prime number representing the finite field.
        """
        self.__coeffs = tuple(int(coeff) % p for coeff in coeffs)
        self.p = p

    def coeffs(self):
        """Return a copy of the list of coefficents of the polynomial."""
        return list(self.__coeffs)

    def __len__(self):
        """Number of stored coefficients, trailing zeros included"""
        return len(self.__coeffs)

    def degree(self):
        """Return the degree of the polynomial, -1 for the zero polynomial."""
        for i in reversed(range(len(self.__coeffs))):
            if self.__coeffs[i] != 0:
                return i
        return -1

    def leading_coefficient(self):
        """Return the leading (highest non-zero) coefficient"""
        d = self.degree()
        return self.__coeffs[d] if d >= 0 else 0

    def is_zero(self):
        """Return the boolean whether the polynomial is equal to zero"""
        return all(c == 0 for c in self.__coeffs)

    def normalize(self):
        """
        Strip zero coefficients from the highest degree downwards,
        so that `len(poly) == poly.degree() + 1`
        """
        return PolynomialRing(self.__coeffs[: self.degree() + 1], self.p)

    def pad(self, length: int):
        """Extend with zero coefficients up to `length`, never truncates"""
        missing = max(length - len(self.__coeffs), 0)
        return PolynomialRing(self.coeffs() + [0] * missing, self.p)

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other):
        if not isinstance(other, PolynomialRing):
            return NotImplemented
        return (
            self.p == other.p
            and self.coeffs()[: self.degree() + 1]
            == other.coeffs()[: other.degree() + 1]
        )

    __hash__ = None

    def __str__(self):
        """Return the string representation of the polynomial."""
        if self.is_zero():
            return "0"

        terms = []
        for i, coeff in enumerate(self.__coeffs):
            if coeff != 0:
                if i == 0:
                    terms.append(str(coeff))
                elif i == 1:
                    if coeff != 1:
                        terms.append(f"{coeff}*x")
                    else:
                        terms.append("x")
                else:
                    if coeff != 1:
                        terms.append(f"{coeff}*x^{i}")
                    else:
                        terms.append(f"x^{i}")

        return " + ".join(terms[::-1])

    def __repr__(self):
        return self.__str__()

    def __add__(self, other):
        if isinstance(other, int):
            coeffs = self.coeffs() or [0]
            coeffs[0] += other

            return PolynomialRing(coeffs, self.p)

        a, b = self.__coeffs, other.coeffs()
        result_coeffs = [
            (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
            for i in range(max(len(a), len(b)))
        ]
        return PolynomialRing(result_coeffs, self.p)

    def __radd__(self, other):
        return self.__add__(other)

    def __neg__(self):
        """Negate polynomial coefficients"""
        return PolynomialRing([-c for c in self.__coeffs], self.p)

    def __sub__(self, other):
        if isinstance(other, int):
            coeffs = self.coeffs() or [0]
            coeffs[0] -= other

            return PolynomialRing(coeffs, self.p)

        a, b = self.__coeffs, other.coeffs()
        result_coeffs = [
            (a[i] if i < len(a) else 0) - (b[i] if i < len(b) else 0)
            for i in range(max(len(a), len(b)))
        ]
        return PolynomialRing(result_coeffs, self.p)

    def __rsub__(self, other):
        return (-self).__add__(other)

    def __mul_by_polynomial(self, other):
        """Multiply two polynomials."""
        a, b = self.__coeffs, other.coeffs()
        if not a or not b:
            return PolynomialRing([], self.p)

        result_coeffs = [0] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            if x == 0:
                continue
            for j, y in enumerate(b):
                result_coeffs[i + j] = (result_coeffs[i + j] + x * y) % self.p

        return PolynomialRing(result_coeffs, self.p)

    def __mul_by_constant(self, c):
        """Multiply polynomial by constant"""
        return PolynomialRing([c * coeff for coeff in self.__coeffs], self.p)

    def __mul__(self, other):
        if isinstance(other, PolynomialRing):
            return self.__mul_by_polynomial(other)
        elif isinstance(other, int):
            return self.__mul_by_constant(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """
        Long division of two polynomials.
        Return quotient and normalized remainder
        """
        divisor = other.coeffs()[: other.degree() + 1]
        if not divisor:
            raise ZeroDivisionError("Division by zero polynomial")

        n = len(divisor) - 1
        inv_lead = pow(divisor[-1], -1, self.p)

        remainder = self.coeffs()
        quotient = [0] * max(len(remainder) - n, 0)

        # eliminate the highest term of the remainder with (lead / lead_divisor) * x^k
        while remainder and len(remainder) - 1 >= n:
            k = len(remainder) - 1 - n
            coeff = remainder[-1] * inv_lead % self.p
            quotient[k] = (quotient[k] + coeff) % self.p
            for j, d in enumerate(divisor):
                remainder[k + j] = (remainder[k + j] - coeff * d) % self.p
            # the highest coefficient is now zero
            remainder.pop()

        return (
            PolynomialRing(quotient, self.p).normalize(),
            PolynomialRing(remainder, self.p).normalize(),
        )

    def __divmod__(self, other):
        return self.__truediv__(other)

    def divide_synthetic(self, other):
        """
        Synthetic division of two polynomials.
        Return quotient and remainder, the remainder always holds
        `len(divisor) - 1` coefficients and is not normalized
        """
        divisor = other.coeffs()[: other.degree() + 1]
        if not divisor:
            raise ZeroDivisionError("Division by zero polynomial")

        n = len(divisor) - 1
        dividend = self.coeffs()
        dividend += [0] * max(n - len(dividend), 0)

        # synthetic division runs from the highest degree downwards
        out = dividend[::-1]
        divisor = divisor[::-1]
        inv_lead = pow(divisor[0], -1, self.p)

        for i in range(len(out) - n):
            out[i] = out[i] * inv_lead % self.p
            coeff = out[i]
            if coeff != 0:
                for j in range(1, len(divisor)):
                    out[i + j] = (out[i + j] - divisor[j] * coeff) % self.p

        separator = len(out) - n
        quotient = out[:separator][::-1]
        remainder = out[separator:][::-1]

        return PolynomialRing(quotient, self.p), PolynomialRing(remainder, self.p)

    def __eval(self, point: int) -> int:
        """Evaluate the polynomial at point with Horner's rule"""
        result = 0
        for coeff in reversed(self.__coeffs):
            result = (result * point + coeff) % self.p
        return result

    def blind_eval(self, powers: list[Point], zero: Point = None) -> Point:
        """
        Evaluate the polynomial "in the exponent": given `powers[i] = g * s^i`
        for an unknown `s`, return `g * p(s) = sum(p[i] * powers[i])`
        """
        if len(self.__coeffs) != len(powers):
            raise DegreeMismatchError(
                f"Mismatch of length between poly {len(self.__coeffs)} "
                f"and blinded evaluation points {len(powers)}"
            )

        if zero is None:
            if not powers:
                raise DegreeMismatchError("Cannot blindly evaluate without any point")
            zero = powers[0].zero()

        total = zero
        for point, coeff in zip(powers, self.__coeffs):
            if coeff != 0:
                total = total + point * coeff

        return total

    def eval(self, point: int) -> int:
        return self.__eval(point)

    def __call__(self, point: Union[int, list[Point]]) -> Union[int, Point]:
        if isinstance(point, int):
            return self.__eval(point)
        elif isinstance(point, list):
            return self.blind_eval(point)
        else:
            raise TypeError(f"Invalid argument: {point}")


def lagrange_basis(n: int, p: int) -> list[PolynomialRing]:
    """
    Lagrange basis polynomials `L_j` over points `x = 1..n`,
    such that `L_j(j + 1) = 1` and `L_j(m) = 0` for the other points
    """
    xs = list(range(1, n + 1))
    basis = []
    for j, xj in enumerate(xs):
        poly = PolynomialRing([1], p)
        den = 1
        for m, xm in enumerate(xs):
            if m == j:
                continue
            poly *= PolynomialRing([-xm, 1], p)
            den = den * (xj - xm) % p

        basis.append(poly * pow(den, -1, p))

    return basis


def interpolate(ys: list[int], p: int, basis: list[PolynomialRing] = None):
    """
    Return Lagrange interpolating polynomial through `(i + 1, ys[i])` over Fp.
    `basis` may be precomputed with `lagrange_basis(len(ys), p)`
    """
    if basis is None:
        basis = lagrange_basis(len(ys), p)

    if len(basis) != len(ys):
        raise DegreeMismatchError(
            f"Got {len(ys)} points for a basis of {len(basis)} polynomials"
        )

    poly = PolynomialRing([], p)
    for y, b in zip(ys, basis):
        if y % p != 0:
            poly += b * y

    return poly.pad(len(ys))


def vanishing_polynomial(degree: int, p: int):
    """Generate polynomial `T = (x - 1) * (x - 2) * (x - 3) ... (x - n)`"""
    poly = PolynomialRing([1], p)
    for i in range(1, degree + 1):
        poly *= PolynomialRing([-i, 1], p)

    return poly


def generate_powers_commit(base: Point, exponent: int, shift: int, power: int, p: int):
    """
    Generate `[base * shift * exponent^i for i in 0..power]`,
    the blinded points consumed by `PolynomialRing.blind_eval`
    """
    points = []
    acc = shift % p
    for _ in range(power + 1):
        points.append(base * acc)
        acc = acc * exponent % p

    return points


def random_polynomial(degree: int, p: int):
    """Polynomial with `degree + 1` random coefficients"""
    return PolynomialRing([get_random_int(p - 1) for _ in range(degree + 1)], p)
