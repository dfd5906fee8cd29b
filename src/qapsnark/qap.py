import logging
from joblib import Parallel, delayed

from .errors import InvalidWitnessError, WitnessLengthError
from .matrix import transpose
from .polynomial import (
    PolynomialRing,
    interpolate,
    lagrange_basis,
    vanishing_polynomial,
)
from .utils import get_n_jobs

logger = logging.getLogger(__name__)


class QAP:

    def __init__(self, p):
        self.U = []
        self.V = []
        self.W = []
        self.T = PolynomialRing([1], p)
        self.n_vars = 0
        self.n_io = 0
        self.n_gates = 0

        self.p = p

    def _r1cs_to_qap_reduction(self, m, basis):
        # once transposed, row i holds the usage of variable i at every gate,
        # interpolated such that poly(g) is the entry of gate g (1-indexed)
        return Parallel(n_jobs=get_n_jobs())(
            delayed(interpolate)(row, self.p, basis) for row in transpose(m)
        )

    def from_r1cs(self, r1cs):
        """
        Parse QAP from R1CS

        Args:
            r1cs: R1CS object with at least one gate
        """
        if r1cs.n_gates == 0:
            raise ValueError("Cannot build a QAP from R1CS without gates")

        self.n_vars = r1cs.n_vars
        self.n_io = r1cs.n_io
        self.n_gates = r1cs.n_gates

        basis = lagrange_basis(self.n_gates, self.p)

        self.U = self._r1cs_to_qap_reduction(r1cs.left, basis)
        self.V = self._r1cs_to_qap_reduction(r1cs.right, basis)
        self.W = self._r1cs_to_qap_reduction(r1cs.out, basis)
        self.T = vanishing_polynomial(self.n_gates, self.p)

        logger.debug(
            "QAP with %d variables, %d gates, deg(T) = %d",
            self.n_vars,
            self.n_gates,
            self.T.degree(),
        )

    def __check_witness(self, witness: list):
        if len(witness) != self.n_vars:
            raise WitnessLengthError(
                f"Witness of length {len(witness)} given for {self.n_vars} variables"
            )

    def __aggregate(self, polys: list, witness: list) -> PolynomialRing:
        # dot product of <witness> . [poly_list]
        result = [0] * self.n_gates
        for s, poly in zip(witness, polys):
            if s % self.p == 0:
                continue
            for i, c in enumerate(poly.coeffs()):
                result[i] += s * c

        return PolynomialRing(result, self.p)

    def aggregate(self, witness: list):
        """
        Witness-weighted sums of the variable polynomials

        Return:
            U, V, W: `sum(s_i * U_i)`, `sum(s_i * V_i)`, `sum(s_i * W_i)`
        """
        self.__check_witness(witness)
        return tuple(self.__aggregate(m, witness) for m in (self.U, self.V, self.W))

    def evaluate_witness(self, witness: list):
        """
        Evaluate QAP with witness vector. Incorrect witness value will raise an error.

        Args:
            witness: Witness vector (public+private) to be evaluated

        Return:
            U, V, W, H: Resulting polynomials to be proved
        """
        U, V, W = self.aggregate(witness)

        H, remainder = (U * V - W) / self.T
        if len(remainder) > 0:
            raise InvalidWitnessError("(U * V - W) / T did not divide to zero")

        return U, V, W, H

    def quotient(self, witness: list) -> PolynomialRing:
        """Return `H` such that `U * V - W = H * T`"""
        return self.evaluate_witness(witness)[3]

    def is_valid(self, witness: list) -> bool:
        """Whether the witness satisfies the QAP"""
        try:
            self.quotient(witness)
        except InvalidWitnessError:
            return False
        return True


def to_qap(r1cs) -> QAP:
    """Convert R1CS into its QAP over the R1CS scalar field"""
    qap = QAP(r1cs.p)
    qap.from_r1cs(r1cs)
    return qap
