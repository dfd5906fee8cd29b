import logging
from qapsnark import R1CS
from qapsnark.groth16 import Groth16
from qapsnark.pinocchio import PHGR13
from qapsnark.utils import Timer


def build_circuit(n_power, crv):
    # inp^n_power = out
    r1cs = R1CS(crv)
    r1cs.new_input("inp")
    r1cs.new_output("out")
    for i in range(n_power - 2):
        r1cs.new_var(f"v{i}")

    prev = "inp"
    for i in range(n_power - 2):
        r1cs.mul(prev, "inp", f"v{i}")
        prev = f"v{i}"
    r1cs.mul(prev, "inp", "out")

    return r1cs


def run(n_power, crv, protocol):

    time_results = []

    with Timer("compile") as t:
        r1cs = build_circuit(n_power, crv)
        snark = protocol(r1cs, crv)
    time_results.append(t.elapsed)

    with Timer("witness") as t:
        pub, priv = r1cs.split_witness(r1cs.solve({"inp": 2}))
    time_results.append(t.elapsed)

    with Timer("setup") as t:
        snark.setup()
    time_results.append(t.elapsed)

    with Timer("prove") as t:
        proof = snark.prove(pub, priv)
    time_results.append(t.elapsed)

    with Timer("verify") as t:
        assert snark.verify(proof, pub)
    time_results.append(t.elapsed)

    return time_results


logging.basicConfig(level=logging.INFO)

n_constraint = [2**4, 2**5, 2**6, 2**7]
crvs = ["BN254", "BLS12_381"]

for n in n_constraint:
    for crv in crvs:
        for protocol in (Groth16, PHGR13):
            result = run(n, crv, protocol)
            print(f"{protocol.__name__}: {n} constraints with {crv} curve")
            print("=" * 50)
            print("Compile time:", result[0])
            print("Witness gen time:", result[1])
            print("Setup time:", result[2])
            print("Prove time:", result[3])
            print("Verify time:", result[4])
            print()
