import pytest

from qapsnark.r1cs import R1CS


def build_cubic_circuit(curve="BN254"):
    # x^3 + x + 5 = out
    r1cs = R1CS(curve)
    r1cs.new_input("x")
    r1cs.new_output("out")
    r1cs.new_var("u")
    r1cs.new_var("v")
    r1cs.new_var("w")

    r1cs.mul("x", "x", "u")
    r1cs.mul("u", "x", "v")
    r1cs.add("v", "x", "w")
    r1cs.add_const("w", 5, "out")

    return r1cs


CUBIC_VALUES = {"x": 3, "out": 35, "u": 9, "v": 27, "w": 30}


@pytest.fixture
def cubic_r1cs():
    return build_cubic_circuit()


@pytest.fixture
def cubic_witness(cubic_r1cs):
    return cubic_r1cs.generate_witness(CUBIC_VALUES)


@pytest.fixture
def cubic_qap(cubic_r1cs):
    return cubic_r1cs.compile()


def build_square_circuit(curve="BN254"):
    # x * x = y, single gate without private variables
    r1cs = R1CS(curve)
    r1cs.new_input("x")
    r1cs.new_output("y")
    r1cs.mul("x", "x", "y")

    return r1cs


def build_two_gate_circuit(curve="BN254"):
    # x * x + 3 = y
    r1cs = R1CS(curve)
    r1cs.new_input("x")
    r1cs.new_output("y")
    r1cs.new_var("u")
    r1cs.mul("x", "x", "u")
    r1cs.add_const("u", 3, "y")

    return r1cs
