"""
zk-SNARKs (Groth16 and Pinocchio) for circuits expressed as R1CS
"""

import logging

from .ecc import EllipticCurve, Point
from .errors import (
    DegreeMismatchError,
    InvalidWitnessError,
    SnarkError,
    UnknownVariableError,
    WitnessLengthError,
)
from .polynomial import PolynomialRing, interpolate, vanishing_polynomial
from .qap import QAP, to_qap
from .r1cs import R1CS, Variable

logging.getLogger(__name__).addHandler(logging.NullHandler())
