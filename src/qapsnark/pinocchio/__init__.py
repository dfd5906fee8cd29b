"""
Pinocchio (PHGR13) proof system
"""

from .protocol import PHGR13
from .prover import EvaluationKey, Proof, Prover
from .setup import PHGR13ToxicWaste, Setup
from .verifier import VerificationKey, Verifier
