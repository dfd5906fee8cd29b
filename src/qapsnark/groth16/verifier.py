"""Verification module of Groth16 protocol"""

import logging

from ..ecc import EllipticCurve
from ..errors import WitnessLengthError
from ..utils import Timer
from .prover import Proof

logger = logging.getLogger(__name__)


class VerifyingKey:
    def __init__(
        self,
        alpha_G1,  # vk_alpha_1
        beta_G2,  # vk_beta_2
        gamma_G2,  # vk_gamma_2
        delta_G2,  # vk_delta_2
        IC,  # ic
    ):
        self.alpha_1 = alpha_G1
        self.beta_2 = beta_G2
        self.gamma_2 = gamma_G2
        self.delta_2 = delta_G2
        self.ic = IC


class Verifier:
    """
    Verifier object

    Args:
        key: `VerifyingKey` from trusted setup
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, key: VerifyingKey, curve: str = "BN254"):
        self.key = key
        self.E = EllipticCurve(curve)

    def verify(self, proof: Proof, public_witness: list) -> bool:
        """
        Verify proof by providing public witness
        """
        if len(self.key.ic) != len(public_witness):
            raise WitnessLengthError(
                f"Expected {len(self.key.ic)} public values, got {len(public_witness)}"
            )

        with Timer("Groth16 verify"):
            try:
                sum_gamma_witness = self.E.multiexp(self.key.ic, public_witness)

                # e(A, B) == e(alpha, beta) * e(sum_gamma_witness, gamma) * e(C, delta)
                valid = self.E.pairing(proof.A, proof.B) == self.E.multi_pairing(
                    [self.key.alpha_1, sum_gamma_witness, proof.C],
                    [self.key.beta_2, self.key.gamma_2, self.key.delta_2],
                )
            except (AttributeError, TypeError, ValueError) as exc:
                logger.warning("Malformed Groth16 proof: %s", exc)
                return False

        if not valid:
            logger.info("Groth16 pairing check failed")

        return valid
