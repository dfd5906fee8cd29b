from ..r1cs import R1CS
from .setup import Setup
from .prover import Proof, Prover
from .verifier import Verifier


class PHGR13:
    """
    Pinocchio proof system (https://eprint.iacr.org/2013/279.pdf)

    Args:
        r1cs: R1CS to be set up from
        curve: `BN254` or `BLS12_381`, defaults to the curve of `r1cs`
    """

    def __init__(self, r1cs: R1CS, curve: str = None):
        self.curve = curve or r1cs.curve
        self.qap = r1cs.compile()

        self.evaluation_key = None
        self.verification_key = None
        self.toxic_waste = None

    def setup(self):
        """Trusted setup to generate `EvaluationKey` and `VerificationKey`"""
        setup = Setup(self.qap, self.curve)
        self.evaluation_key, self.verification_key = setup.generate()
        self.toxic_waste = setup.toxic_waste

    def prove(self, public_witness: list, private_witness: list) -> Proof:
        """
        Prove statement from R1CS by providing public and private witness
        """
        assert self.evaluation_key, "EvaluationKey has not been generated"
        return Prover(self.qap, self.evaluation_key, self.curve).prove(
            public_witness, private_witness
        )

    def verify(self, proof: Proof, public_witness: list) -> bool:
        """
        Verify proof by providing public witness
        """
        assert self.verification_key, "VerificationKey has not been generated"
        return Verifier(self.verification_key, self.curve).verify(
            proof, public_witness
        )
