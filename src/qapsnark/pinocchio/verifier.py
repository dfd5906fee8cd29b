"""Verification module of Pinocchio (PHGR13) protocol"""

import logging

from ..ecc import EllipticCurve
from ..errors import WitnessLengthError
from ..utils import Timer
from .prover import Proof

logger = logging.getLogger(__name__)


class VerificationKey:
    def __init__(
        self, g1, g2, av, aw, ay, gamma, bgamma1, bgamma2, yts, vs, ws, ys, n_io
    ):
        self.g1 = g1
        self.g2 = g2
        # g^alpha_v (G2), g^alpha_w (G1), g^alpha_y (G2)
        self.av = av
        self.aw = aw
        self.ay = ay
        # g^gamma (G2)
        self.gamma = gamma
        # g^(beta * gamma) in G1 and G2
        self.bgamma1 = bgamma1
        self.bgamma2 = bgamma2
        # g_y^t(s) (G2) where t is the vanishing polynomial
        self.yts = yts
        # g_v^v_k(s), g_w^w_k(s), g_y^y_k(s) for all variables
        self.vs = vs
        self.ws = ws
        self.ys = ys
        self.n_io = n_io


class Verifier:
    """
    Verifier object, a proof is valid when the division, CRS-origin and
    linear checks all hold

    Args:
        key: `VerificationKey` from trusted setup
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, key: VerificationKey, curve: str = "BN254"):
        self.key = key
        self.E = EllipticCurve(curve)

    def __check_public_witness(self, public_witness: list):
        if len(public_witness) != self.key.n_io:
            raise WitnessLengthError(
                f"Expected {self.key.n_io} public values, got {len(public_witness)}"
            )

    def __pairing_check(self, name, check) -> bool:
        try:
            valid = check()
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Malformed PHGR13 proof in %s check: %s", name, exc)
            return False

        if not valid:
            logger.info("PHGR13 %s check failed", name)
        return valid

    def check_division(self, proof: Proof, public_witness: list) -> bool:
        """
        e(g_v^v(s), g_w^w(s)) == e(g^h(s), g_y^t(s)) * e(g_y^y(s), g),
        that is `v(s) * w(s) - y(s) == h(s) * t(s)` in the exponent
        """
        self.__check_public_witness(public_witness)

        def check():
            n_io = self.key.n_io
            # public part rebuilt by the verifier, private part from the proof
            v = self.E.multiexp(self.key.vs[:n_io], public_witness) + proof.vss
            w = self.E.multiexp(self.key.ws[:n_io], public_witness) + proof.wss
            y = self.E.multiexp(self.key.ys[:n_io], public_witness) + proof.yss

            return self.E.pairing(v, w) == self.E.multi_pairing(
                [proof.hs, y], [self.key.yts, self.key.g2]
            )

        return self.__pairing_check("division", check)

    def check_crs_origin(self, proof: Proof) -> bool:
        """
        The alpha-shifted terms commit to the same polynomials as the plain ones,
        so they were built from the evaluation key
        """

        def check():
            v = self.E.pairing(proof.vas, self.key.g2) == self.E.pairing(
                proof.vss, self.key.av
            )
            w = self.E.pairing(self.key.g1, proof.was) == self.E.pairing(
                self.key.aw, proof.wss
            )
            y = self.E.pairing(proof.yas, self.key.g2) == self.E.pairing(
                proof.yss, self.key.ay
            )
            return v and w and y

        return self.__pairing_check("CRS origin", check)

    def check_linear(self, proof: Proof) -> bool:
        """
        e(gz, g^gamma) == e(g_v^v(s) * g_y^y(s), g^(beta gamma)) * e(g^(beta gamma), g_w^w(s)),
        the same coefficients were used for v, w and y
        """

        def check():
            return self.E.pairing(proof.gz, self.key.gamma) == self.E.multi_pairing(
                [proof.vss + proof.yss, self.key.bgamma1],
                [self.key.bgamma2, proof.wss],
            )

        return self.__pairing_check("linear", check)

    def verify(self, proof: Proof, public_witness: list) -> bool:
        """
        Verify proof by providing public witness
        """
        with Timer("PHGR13 verify"):
            results = [
                self.check_division(proof, public_witness),
                self.check_crs_origin(proof),
                self.check_linear(proof),
            ]

        return all(results)
