"""Trusted setup module of Groth16 protocol"""

import logging

from ..qap import QAP
from ..ecc import EllipticCurve
from ..polynomial import generate_powers_commit
from .prover import ProvingKey
from .verifier import VerifyingKey
from ..utils import Timer

logger = logging.getLogger(__name__)


class Groth16ToxicWaste:
    """
    Secret scalars of a Groth16 setup. Never part of a key,
    only kept on the `Setup` object for inspection in tests.
    """

    def __init__(self, tau, alpha, beta, gamma, delta):
        self.tau = tau
        self.alpha = alpha
        self.beta = beta
        self.gamma = gamma
        self.delta = delta


class Setup:

    def __init__(self, qap: QAP, curve: str = "BN254"):
        """
        Trusted setup object

        Args:
            qap: QAP to be set up from
            curve: `BN254` or `BLS12_381`
        """
        self.qap = qap
        self.E = EllipticCurve(curve)
        self.order = self.E.order
        self.toxic_waste = None

        if qap.p != self.order:
            raise ValueError(f"QAP field does not match the {curve} scalar field")

    def _linear_poly(self, i, tau, alpha, beta):
        """`beta * U_i(tau) + alpha * V_i(tau) + W_i(tau)` for the i-th variable"""
        return (
            beta * self.qap.U[i](tau) + alpha * self.qap.V[i](tau) + self.qap.W[i](tau)
        ) % self.order

    def generate(self) -> tuple[ProvingKey, VerifyingKey]:
        """Generate `ProvingKey` and `VerifyingKey`"""

        G1 = self.E.G1()
        G2 = self.E.G2()

        # generate random toxic waste
        tau = self.E.random_scalar()
        alpha = self.E.random_scalar()
        beta = self.E.random_scalar()
        gamma = self.E.random_scalar()
        delta = self.E.random_scalar()

        inv_gamma = pow(gamma, -1, self.order)
        inv_delta = pow(delta, -1, self.order)

        with Timer("Groth16 setup"):
            alpha_G1 = G1 * alpha
            beta_G1 = G1 * beta
            beta_G2 = G2 * beta
            gamma_G2 = G2 * gamma
            delta_G1 = G1 * delta
            delta_G2 = G2 * delta

            n_gates = self.qap.n_gates
            n_io = self.qap.n_io

            power_of_tau = [pow(tau, i, self.order) for i in range(n_gates)]
            tau_G1 = self.E.batch_mul(G1, power_of_tau)
            tau_G2 = self.E.batch_mul(G2, power_of_tau)

            K = [
                self._linear_poly(i, tau, alpha, beta) for i in range(self.qap.n_vars)
            ]

            # {tau^i * t(tau) / delta} for i in 0..n_gates-2, deg(H) <= n_gates-2
            t = self.qap.T(tau)
            target_G1 = generate_powers_commit(
                G1, tau, t * inv_delta, n_gates - 2, self.order
            )

            k_gamma_G1 = self.E.batch_mul(
                G1, [k * inv_gamma % self.order for k in K[:n_io]]
            )
            k_delta_G1 = self.E.batch_mul(
                G1, [k * inv_delta % self.order for k in K[n_io:]]
            )

        logger.debug(
            "Groth16 keys: %d powers of tau, %d public and %d private linear terms",
            len(tau_G1),
            len(k_gamma_G1),
            len(k_delta_G1),
        )

        self.toxic_waste = Groth16ToxicWaste(tau, alpha, beta, gamma, delta)

        pkey = ProvingKey(
            alpha_G1,
            beta_G1,
            beta_G2,
            delta_G1,
            delta_G2,
            tau_G1,
            tau_G2,
            target_G1,
            k_delta_G1,
        )
        vkey = VerifyingKey(alpha_G1, beta_G2, gamma_G2, delta_G2, k_gamma_G1)

        return pkey, vkey
