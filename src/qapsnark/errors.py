"""Errors raised by qapsnark"""


class SnarkError(Exception):
    """Base class of every error raised by qapsnark"""


class WitnessLengthError(SnarkError, ValueError):
    """Witness vector length does not match the number of circuit variables"""


class InvalidWitnessError(SnarkError, ValueError):
    """Witness does not satisfy the circuit: `(U * V - W) / T` leaves a remainder"""


class DegreeMismatchError(SnarkError, ValueError):
    """Polynomial length differs from the number of blinded evaluation points"""


class UnknownVariableError(SnarkError, KeyError):
    """Variable name is not registered in the constraint system"""
