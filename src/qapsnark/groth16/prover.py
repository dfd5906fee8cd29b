"""Proving module of Groth16 protocol"""

import logging

from ..ecc import EllipticCurve
from ..errors import InvalidWitnessError, WitnessLengthError
from ..qap import QAP
from ..utils import Timer

logger = logging.getLogger(__name__)


class Proof:

    def __init__(self, A=None, B=None, C=None):
        self.A = A
        self.B = B
        self.C = C

    def __str__(self):
        return f"A = {self.A}\nB = {self.B}\nC = {self.C}"

    def __repr__(self):
        return self.__str__()


class ProvingKey:
    def __init__(
        self,
        alpha_G1,
        beta_G1,
        beta_G2,
        delta_G1,
        delta_G2,
        tau_G1,
        tau_G2,
        target_G1,
        k_delta_G1,
    ):
        self.alpha_1 = alpha_G1
        self.beta_1 = beta_G1
        self.beta_2 = beta_G2
        self.delta_1 = delta_G1
        self.delta_2 = delta_G2
        # {tau^i} for i in 0..n_gates-1
        self.tau_1 = tau_G1
        self.tau_2 = tau_G2
        # {tau^i * t(tau) / delta} for i in 0..n_gates-2
        self.target_1 = target_G1
        # (beta * U_i(tau) + alpha * V_i(tau) + W_i(tau)) / delta for private variables
        self.kdelta_1 = k_delta_G1


class Prover:
    """
    Prover object

    Args:
        qap: QAP to be proved from
        key: `ProvingKey` from trusted setup
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, qap: QAP, key: ProvingKey, curve: str = "BN254"):

        self.qap = qap
        self.key = key
        self.E = EllipticCurve(curve)
        self.order = self.E.order

        if key.delta_1.is_zero() or key.delta_2.is_zero():
            raise ValueError("Key delta_1 or delta_2 is zero element!")

    def prove(self, public_witness: list, private_witness: list) -> Proof:
        """
        Prove statement from QAP by providing public and private witness
        """
        if len(public_witness) != self.qap.n_io or len(private_witness) != len(
            self.key.kdelta_1
        ):
            raise WitnessLengthError(
                f"Expected {self.qap.n_io} public and {len(self.key.kdelta_1)} "
                f"private values, got {len(public_witness)} and {len(private_witness)}"
            )

        r = self.E.random_scalar()
        s = self.E.random_scalar()

        with Timer("Groth16 prove"):
            try:
                U, V, _, H = self.qap.evaluate_witness(public_witness + private_witness)
            except InvalidWitnessError:
                logger.info("Refusing to prove an invalid witness")
                raise

            n_tau = len(self.key.tau_1)

            A = (
                U.pad(n_tau).blind_eval(self.key.tau_1)
                + self.key.alpha_1
                + (self.key.delta_1 * r)
            )
            B1 = (
                V.pad(n_tau).blind_eval(self.key.tau_1)
                + self.key.beta_1
                + (self.key.delta_1 * s)
            )
            B2 = (
                V.pad(n_tau).blind_eval(self.key.tau_2)
                + self.key.beta_2
                + (self.key.delta_2 * s)
            )
            HZ = H.pad(len(self.key.target_1)).blind_eval(
                self.key.target_1, self.E.Z1()
            )

            sum_delta_witness = self.E.multiexp(
                self.key.kdelta_1, private_witness, self.E.Z1()
            )

            C = (
                HZ
                + sum_delta_witness
                + (A * s)
                + (B1 * r)
                + (-self.key.delta_1 * (r * s % self.order))
            )

        return Proof(A, B2, C)
