"""Proving module of Pinocchio (PHGR13) protocol"""

import logging

from ..ecc import EllipticCurve
from ..errors import InvalidWitnessError, WitnessLengthError
from ..qap import QAP
from ..utils import Timer

logger = logging.getLogger(__name__)


class Proof:
    """
    Pinocchio proof, every `*ss` / `*as` term only covers the private
    (intermediate) variables, the verifier adds the public part itself
    """

    def __init__(
        self, vss=None, wss=None, yss=None, vas=None, was=None, yas=None, hs=None, gz=None
    ):
        # g_v^v_mid(s), g_w^w_mid(s), g_y^y_mid(s)
        self.vss = vss
        self.wss = wss
        self.yss = yss
        # same commitments shifted by alpha_v, alpha_w, alpha_y
        self.vas = vas
        self.was = was
        self.yas = yas
        # g^h(s)
        self.hs = hs
        # g^(beta * (r_v v_mid(s) + r_w w_mid(s) + r_y y_mid(s)))
        self.gz = gz

    def copy(self):
        return Proof(
            self.vss, self.wss, self.yss, self.vas, self.was, self.yas, self.hs, self.gz
        )

    def __str__(self):
        return (
            f"vss = {self.vss}\nwss = {self.wss}\nyss = {self.yss}\n"
            f"vas = {self.vas}\nwas = {self.was}\nyas = {self.yas}\n"
            f"hs = {self.hs}\ngz = {self.gz}"
        )

    def __repr__(self):
        return self.__str__()


class EvaluationKey:
    """
    Evaluation key of the prover, the commitments are only
    for the private (intermediate) variables
    """

    def __init__(self, vs, ws, ys, vas, was, yas, vbs, wbs, ybs, gsi):
        # g_v^v_k(s) (G1), g_w^w_k(s) (G2), g_y^y_k(s) (G1)
        self.vs = vs
        self.ws = ws
        self.ys = ys
        # shifted by alpha_v, alpha_w, alpha_y
        self.vas = vas
        self.was = was
        self.yas = yas
        # g_v^(beta v_k(s)), g^(beta r_w w_k(s)), g_y^(beta y_k(s)), all in G1
        self.vbs = vbs
        self.wbs = wbs
        self.ybs = ybs
        # g^(s^i) for i in 0..deg(T)-2
        self.gsi = gsi


class Prover:
    """
    Prover object

    Args:
        qap: QAP to be proved from
        key: `EvaluationKey` from trusted setup
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, qap: QAP, key: EvaluationKey, curve: str = "BN254"):
        self.qap = qap
        self.key = key
        self.E = EllipticCurve(curve)

    def prove(self, public_witness: list, private_witness: list) -> Proof:
        """
        Prove statement from QAP by providing public and private witness
        """
        if len(public_witness) != self.qap.n_io or len(private_witness) != len(
            self.key.vs
        ):
            raise WitnessLengthError(
                f"Expected {self.qap.n_io} public and {len(self.key.vs)} "
                f"private values, got {len(public_witness)} and {len(private_witness)}"
            )

        Z1 = self.E.Z1()
        Z2 = self.E.Z2()

        with Timer("PHGR13 prove"):
            try:
                H = self.qap.quotient(public_witness + private_witness)
            except InvalidWitnessError:
                logger.info("Refusing to prove an invalid witness")
                raise

            hs = H.pad(len(self.key.gsi)).blind_eval(self.key.gsi, Z1)

            vss = self.E.multiexp(self.key.vs, private_witness, Z1)
            wss = self.E.multiexp(self.key.ws, private_witness, Z2)
            yss = self.E.multiexp(self.key.ys, private_witness, Z1)

            vas = self.E.multiexp(self.key.vas, private_witness, Z1)
            was = self.E.multiexp(self.key.was, private_witness, Z2)
            yas = self.E.multiexp(self.key.yas, private_witness, Z1)

            gz = (
                self.E.multiexp(self.key.vbs, private_witness, Z1)
                + self.E.multiexp(self.key.wbs, private_witness, Z1)
                + self.E.multiexp(self.key.ybs, private_witness, Z1)
            )

        return Proof(vss, wss, yss, vas, was, yas, hs, gz)
