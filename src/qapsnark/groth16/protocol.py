from ..r1cs import R1CS
from .setup import Setup
from .prover import Proof, Prover
from .verifier import Verifier


class Groth16:
    """
    Groth16 proof system (https://eprint.iacr.org/2016/260.pdf)

    Args:
        r1cs: R1CS to be set up from
        curve: `BN254` or `BLS12_381`, defaults to the curve of `r1cs`
    """

    def __init__(self, r1cs: R1CS, curve: str = None):
        self.curve = curve or r1cs.curve
        self.qap = r1cs.compile()

        self.proving_key = None
        self.verifying_key = None
        self.toxic_waste = None

    def setup(self):
        """Trusted setup to generate `ProvingKey` and `VerifyingKey`"""
        setup = Setup(self.qap, self.curve)
        self.proving_key, self.verifying_key = setup.generate()
        self.toxic_waste = setup.toxic_waste

    def prove(self, public_witness: list, private_witness: list) -> Proof:
        """
        Prove statement from R1CS by providing public and private witness
        """
        assert self.proving_key, "ProvingKey has not been generated"
        return Prover(self.qap, self.proving_key, self.curve).prove(
            public_witness, private_witness
        )

    def verify(self, proof: Proof, public_witness: list) -> bool:
        """
        Verify proof by providing public witness
        """
        assert self.verifying_key, "VerifyingKey has not been generated"
        return Verifier(self.verifying_key, self.curve).verify(proof, public_witness)
