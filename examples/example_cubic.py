"""
Prove knowledge of x such that x^3 + x + 5 == 35 without revealing
the intermediate values, with both Groth16 and Pinocchio (PHGR13)
"""

from qapsnark import R1CS
from qapsnark.groth16 import Groth16
from qapsnark.pinocchio import PHGR13

r1cs = R1CS("BN254")
r1cs.new_input("x")
r1cs.new_output("out")
r1cs.new_var("u")
r1cs.new_var("v")
r1cs.new_var("w")

r1cs.mul("x", "x", "u")
r1cs.mul("u", "x", "v")
r1cs.add("v", "x", "w")
r1cs.add_const("w", 5, "out")

pub, priv = r1cs.split_witness(r1cs.solve({"x": 3}))
print("Public witness:", pub)

groth16 = Groth16(r1cs)
groth16.setup()

proof = groth16.prove(pub, priv)
assert groth16.verify(proof, pub)
print("Groth16 proof is valid")

# claim a different output with the same proof
assert not groth16.verify(proof, [1, 3, 36])
print("Groth16 proof is invalid for out = 36")

phgr13 = PHGR13(r1cs)
phgr13.setup()

proof = phgr13.prove(pub, priv)
assert phgr13.verify(proof, pub)
print("PHGR13 proof is valid")
