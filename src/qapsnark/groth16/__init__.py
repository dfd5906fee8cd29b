"""
Groth16 proof system
"""

from .protocol import Groth16
from .prover import Proof, ProvingKey, Prover
from .setup import Groth16ToxicWaste, Setup
from .verifier import VerifyingKey, Verifier
