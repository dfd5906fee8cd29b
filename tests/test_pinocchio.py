import copy
import pytest

from conftest import (
    CUBIC_VALUES,
    build_cubic_circuit,
    build_square_circuit,
    build_two_gate_circuit,
)

from qapsnark.ecc import EllipticCurve
from qapsnark.errors import InvalidWitnessError, WitnessLengthError
from qapsnark.pinocchio import PHGR13, Proof, Verifier


@pytest.fixture(scope="module")
def phgr13_bn254():
    r1cs = build_cubic_circuit()
    pub, priv = r1cs.split_witness(r1cs.generate_witness(CUBIC_VALUES))

    phgr13 = PHGR13(r1cs)
    phgr13.setup()

    proof = phgr13.prove(pub, priv)

    return phgr13, proof, (pub, priv)


def random_point(E, group="G1"):
    g = E.G1() if group == "G1" else E.G2()
    return g * E.random_scalar()


def checks(verifier, proof, pub):
    """Result of the division, CRS origin and linear checks"""
    return (
        verifier.check_division(proof, pub),
        verifier.check_crs_origin(proof),
        verifier.check_linear(proof),
    )


def tampered(proof, **fields):
    forged = proof.copy()
    for name, value in fields.items():
        setattr(forged, name, value)
    return forged


def test_phgr13_bn254(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    verifier = Verifier(phgr13.verification_key)

    assert pub == [1, 3, 35]
    assert checks(verifier, proof, pub) == (True, True, True)
    assert phgr13.verify(proof, pub)


def test_phgr13_bls12_381():

    r1cs = build_cubic_circuit("BLS12_381")
    pub, priv = r1cs.split_witness(r1cs.solve({"x": 3}))

    phgr13 = PHGR13(r1cs)
    assert phgr13.curve == "BLS12_381"
    phgr13.setup()

    proof = phgr13.prove(pub, priv)
    assert phgr13.verify(proof, pub)


def test_phgr13_solved_witness(phgr13_bn254):

    phgr13, _, _ = phgr13_bn254
    r1cs = build_cubic_circuit()
    pub, priv = r1cs.split_witness(r1cs.solve({"x": 5}))

    proof = phgr13.prove(pub, priv)

    assert phgr13.verify(proof, pub)


def test_phgr13_tampered_quotient(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    E = EllipticCurve("BN254")
    verifier = Verifier(phgr13.verification_key)

    forged = tampered(proof, hs=random_point(E))

    assert checks(verifier, forged, pub) == (False, True, True)
    assert not verifier.verify(forged, pub)


def test_phgr13_tampered_linear_term(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    E = EllipticCurve("BN254")
    verifier = Verifier(phgr13.verification_key)

    forged = tampered(proof, gz=random_point(E))

    assert checks(verifier, forged, pub) == (True, True, False)
    assert not verifier.verify(forged, pub)


def test_phgr13_tampered_shifted_terms(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    E = EllipticCurve("BN254")
    verifier = Verifier(phgr13.verification_key)

    for name, group in (("vas", "G1"), ("was", "G2"), ("yas", "G1")):
        forged = tampered(proof, **{name: random_point(E, group)})

        assert checks(verifier, forged, pub) == (True, False, True)


def test_phgr13_tampered_commitments(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    E = EllipticCurve("BN254")
    verifier = Verifier(phgr13.verification_key)

    # plain commitments take part in every family
    for name, group in (("vss", "G1"), ("wss", "G2"), ("yss", "G1")):
        forged = tampered(proof, **{name: random_point(E, group)})

        assert checks(verifier, forged, pub) == (False, False, False)
        assert not verifier.verify(forged, pub)


def test_phgr13_tampered_verification_key(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    E = EllipticCurve("BN254")

    vk = copy.copy(phgr13.verification_key)
    vk.yts = random_point(E, "G2")
    assert checks(Verifier(vk), proof, pub) == (False, True, True)

    vk = copy.copy(phgr13.verification_key)
    vk.av = random_point(E, "G2")
    assert checks(Verifier(vk), proof, pub) == (True, False, True)

    vk = copy.copy(phgr13.verification_key)
    vk.bgamma2 = random_point(E, "G2")
    assert checks(Verifier(vk), proof, pub) == (True, True, False)


def test_phgr13_forged_public_witness(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    verifier = Verifier(phgr13.verification_key)

    assert checks(verifier, proof, [1, 3, 36]) == (False, True, True)
    assert phgr13.verify(proof, [1, 3, 36]) is False


def test_phgr13_malformed_proof(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, _ = witness
    verifier = Verifier(phgr13.verification_key)

    # wss must be a G2 point
    forged = tampered(proof, wss=proof.vss)
    assert checks(verifier, forged, pub) == (False, False, False)

    forged = tampered(proof, hs=None)
    assert checks(verifier, forged, pub) == (False, True, True)
    assert phgr13.verify(forged, pub) is False

    assert phgr13.verify(Proof(), pub) is False
    assert phgr13.verify(None, pub) is False
    assert checks(verifier, None, pub) == (False, False, False)


def test_phgr13_wrong_witness_length(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    pub, priv = witness

    with pytest.raises(WitnessLengthError):
        phgr13.verify(proof, pub + [1])

    with pytest.raises(WitnessLengthError):
        phgr13.prove(pub, priv[:2])


def test_phgr13_invalid_witness(phgr13_bn254):

    phgr13, _, witness = phgr13_bn254
    pub, _ = witness

    with pytest.raises(InvalidWitnessError):
        phgr13.prove(pub, [9, 27, 31])


def test_phgr13_requires_setup():

    phgr13 = PHGR13(build_cubic_circuit())

    with pytest.raises(AssertionError):
        phgr13.prove([1, 3, 35], [9, 27, 30])


def test_phgr13_setup_keys(phgr13_bn254):

    phgr13, proof, witness = phgr13_bn254
    _, priv = witness
    qap = phgr13.qap
    ek = phgr13.evaluation_key
    vk = phgr13.verification_key
    waste = phgr13.toxic_waste

    E = EllipticCurve("BN254")
    o = E.order
    G1, G2 = E.G1(), E.G2()
    s = waste.s

    assert waste.r_y == waste.r_v * waste.r_w % o
    assert vk.n_io == qap.n_io
    assert len(vk.vs) == qap.n_vars
    assert len(ek.vs) == len(ek.ws) == len(ek.ys) == qap.n_vars - qap.n_io
    assert len(ek.gsi) == qap.n_gates - 1
    assert ek.gsi[1] == G1 * s

    assert vk.yts == G2 * (waste.r_y * qap.T(s))
    assert vk.ws[0] == G2 * (waste.r_w * qap.V[0](s))

    # prover commitments match the evaluations at the secret point
    H = qap.quotient(witness[0] + priv)
    assert proof.hs == G1 * H(s)

    mid = range(qap.n_io, qap.n_vars)
    v = sum(c * qap.U[k](s) for c, k in zip(priv, mid))
    w = sum(c * qap.V[k](s) for c, k in zip(priv, mid))
    y = sum(c * qap.W[k](s) for c, k in zip(priv, mid))

    assert proof.vss == G1 * (waste.r_v * v)
    assert proof.wss == G2 * (waste.r_w * w)
    assert proof.yas == G1 * (waste.r_y * waste.alpha_y * y)
    assert proof.gz == G1 * (
        waste.beta * (waste.r_v * v + waste.r_w * w + waste.r_y * y)
    )


def test_phgr13_single_gate():

    r1cs = build_square_circuit()
    pub, priv = r1cs.split_witness(r1cs.solve({"x": 7}))

    phgr13 = PHGR13(r1cs)
    phgr13.setup()

    ek = phgr13.evaluation_key
    assert len(ek.gsi) == 0
    assert len(ek.vs) == len(ek.ws) == len(ek.ys) == 0

    proof = phgr13.prove(pub, priv)

    # no private variables, every prover term is the identity
    assert proof.hs.is_zero()
    assert proof.vss.is_zero()
    assert proof.wss.is_zero()
    assert proof.gz.is_zero()

    verifier = Verifier(phgr13.verification_key)
    assert checks(verifier, proof, pub) == (True, True, True)
    assert phgr13.verify(proof, pub)

    assert checks(verifier, proof, [1, 7, 50]) == (False, True, True)
    assert phgr13.verify(proof, [1, 7, 50]) is False


def test_phgr13_two_gates():

    r1cs = build_two_gate_circuit()
    pub, priv = r1cs.split_witness(r1cs.solve({"x": 7}))

    phgr13 = PHGR13(r1cs)
    phgr13.setup()

    assert len(phgr13.evaluation_key.gsi) == 1
    assert len(phgr13.evaluation_key.vs) == 1

    proof = phgr13.prove(pub, priv)

    assert phgr13.verify(proof, pub)
    assert phgr13.verify(proof, [1, 7, 53]) is False

    with pytest.raises(InvalidWitnessError):
        phgr13.prove(pub, [48])
