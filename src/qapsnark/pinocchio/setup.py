"""Trusted setup module of Pinocchio (PHGR13) protocol (https://eprint.iacr.org/2013/279.pdf)"""

import logging

from ..qap import QAP
from ..ecc import EllipticCurve
from ..polynomial import generate_powers_commit
from .prover import EvaluationKey
from .verifier import VerificationKey
from ..utils import Timer

logger = logging.getLogger(__name__)


class PHGR13ToxicWaste:
    """
    Secret scalars of a Pinocchio setup. Never part of a key,
    only kept on the `Setup` object for inspection in tests.
    """

    def __init__(self, s, alpha_v, alpha_w, alpha_y, r_v, r_w, r_y, beta, gamma):
        self.s = s
        self.alpha_v = alpha_v
        self.alpha_w = alpha_w
        self.alpha_y = alpha_y
        self.r_v = r_v
        self.r_w = r_w
        self.r_y = r_y
        self.beta = beta
        self.gamma = gamma


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

    def __scaled(self, values, factor):
        return [v * factor % self.order for v in values]

    def generate(self) -> tuple[EvaluationKey, VerificationKey]:
        """Generate `EvaluationKey` and `VerificationKey`"""

        G1 = self.E.G1()
        G2 = self.E.G2()
        o = self.order

        # s is the secret evaluation point, the prover only gets g^(s^i)
        s = self.E.random_scalar()
        # alphas shift each polynomial to prove it comes from the CRS
        alpha_v = self.E.random_scalar()
        alpha_w = self.E.random_scalar()
        alpha_y = self.E.random_scalar()
        # bases of the v, w and y commitments
        r_v = self.E.random_scalar()
        r_w = self.E.random_scalar()
        r_y = r_v * r_w % o
        # beta and gamma check that the same coefficients were used for v, w and y
        beta = self.E.random_scalar()
        gamma = self.E.random_scalar()

        with Timer("PHGR13 setup"):
            g_v = G1 * r_v
            g_w = G2 * r_w
            g_y = G1 * r_y

            v = [poly(s) for poly in self.qap.U]
            w = [poly(s) for poly in self.qap.V]
            y = [poly(s) for poly in self.qap.W]

            n_io = self.qap.n_io
            v_mid, w_mid, y_mid = v[n_io:], w[n_io:], y[n_io:]

            ek = EvaluationKey(
                vs=self.E.batch_mul(g_v, v_mid),
                ws=self.E.batch_mul(g_w, w_mid),
                ys=self.E.batch_mul(g_y, y_mid),
                vas=self.E.batch_mul(g_v, self.__scaled(v_mid, alpha_v)),
                was=self.E.batch_mul(g_w, self.__scaled(w_mid, alpha_w)),
                yas=self.E.batch_mul(g_y, self.__scaled(y_mid, alpha_y)),
                vbs=self.E.batch_mul(g_v, self.__scaled(v_mid, beta)),
                wbs=self.E.batch_mul(G1, self.__scaled(w_mid, beta * r_w)),
                ybs=self.E.batch_mul(g_y, self.__scaled(y_mid, beta)),
                # deg(H) <= deg(T) - 2
                gsi=generate_powers_commit(G1, s, 1, self.qap.T.degree() - 2, o),
            )

            bgamma = beta * gamma % o

            vk = VerificationKey(
                g1=G1,
                g2=G2,
                av=G2 * alpha_v,
                aw=G1 * alpha_w,
                ay=G2 * alpha_y,
                gamma=G2 * gamma,
                bgamma1=G1 * bgamma,
                bgamma2=G2 * bgamma,
                yts=G2 * (r_y * self.qap.T(s) % o),
                vs=self.E.batch_mul(g_v, v),
                ws=self.E.batch_mul(g_w, w),
                ys=self.E.batch_mul(g_y, y),
                n_io=n_io,
            )

        logger.debug(
            "PHGR13 keys: %d private variables, %d powers of s",
            len(ek.vs),
            len(ek.gsi),
        )

        self.toxic_waste = PHGR13ToxicWaste(
            s, alpha_v, alpha_w, alpha_y, r_v, r_w, r_y, beta, gamma
        )

        return ek, vk
