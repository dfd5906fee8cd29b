import pickle
import pytest

from py_ecc.optimized_bn128 import FQ

from qapsnark.ecc import EllipticCurve, Point
from qapsnark.utils import get_n_jobs, get_random_int


@pytest.fixture
def bn254():
    return EllipticCurve("BN254")


def test_curve_names():
    assert EllipticCurve("BN128").order == EllipticCurve("BN254").order
    assert EllipticCurve("ALT_BN128").order == EllipticCurve("BN254").order
    assert EllipticCurve("BLS12_381").order != EllipticCurve("BN254").order

    with pytest.raises(KeyError):
        EllipticCurve("SECP256K1")


def test_point_arithmetic(bn254):

    G1 = bn254.G1()
    G2 = bn254.G2()

    assert G1 * 2 == G1 + G1
    assert 3 * G1 == G1 * 3
    assert G1 * (bn254.order + 3) == G1 * 3
    assert (G1 - G1).is_zero()
    assert (-G2 + G2).is_zero()
    assert G2 * 5 - G2 * 2 == G2 * 3
    assert sum([G1, G1, G1]) == G1 * 3
    assert bn254.Z1() + G1 == G1
    assert (G1 * 0).is_zero()

    assert G1 != G2
    assert G1 != 1
    assert str(bn254.Z1()) == "G1(inf)"


def test_point_type_errors(bn254):

    G1 = bn254.G1()
    G2 = bn254.G2()
    other = EllipticCurve("BLS12_381").G1()

    with pytest.raises(TypeError):
        G1 + G2

    with pytest.raises(TypeError):
        G1 + other

    with pytest.raises(TypeError):
        G1 + None

    with pytest.raises(TypeError):
        G1 * 1.5

    assert G1 != other


def test_point_is_picklable(bn254):
    a = bn254.G1() * 1337
    b = bn254.G2() * 7331

    assert pickle.loads(pickle.dumps(a)) == a
    assert pickle.loads(pickle.dumps(b)) == b


def test_pairing_bilinearity():

    for crv in ("BN254", "BLS12_381"):
        E = EllipticCurve(crv)

        a = get_random_int(1000)
        b = get_random_int(1000)

        assert E.pairing(E.G1() * a, E.G2() * b) == E.pairing(E.G1() * (a * b), E.G2())
        assert E.multi_pairing(
            [E.G1() * 2, E.G1() * 3], [E.G2(), E.G2()]
        ) == E.pairing(E.G1() * 5, E.G2())


def test_pairing_rejects_bad_arguments(bn254):

    G1 = bn254.G1()
    G2 = bn254.G2()

    with pytest.raises(TypeError):
        bn254.pairing(G2, G1)

    with pytest.raises(TypeError):
        bn254.pairing(G1, None)

    with pytest.raises(TypeError):
        bn254.pairing(EllipticCurve("BLS12_381").G1(), G2)

    off_curve = Point((FQ(1), FQ(1), FQ(1)), "G1", "BN254")
    assert not bn254.is_on_curve(off_curve)
    with pytest.raises(ValueError):
        bn254.pairing(off_curve, G2)

    with pytest.raises(ValueError):
        bn254.multi_pairing([G1, G1], [G2])

    with pytest.raises(ValueError):
        bn254.multi_pairing([], [])


def test_multiexp(bn254):

    G1 = bn254.G1()

    assert bn254.multiexp([G1, G1 * 2], [3, 4]) == G1 * 11
    assert bn254.multiexp([], [], bn254.Z1()).is_zero()

    with pytest.raises(ValueError):
        bn254.multiexp([], [])

    with pytest.raises(ValueError):
        bn254.multiexp([G1], [1, 2])


def test_batch_mul(bn254):

    G2 = bn254.G2()

    assert bn254.batch_mul(G2, [1, 2, 3]) == [G2, G2 * 2, G2 * 3]
    assert bn254.batch_mul([G2, G2 * 2], [5, 7]) == [G2 * 5, G2 * 14]

    with pytest.raises(ValueError):
        bn254.batch_mul([G2], [1, 2])


def test_random_scalar(bn254):

    for _ in range(10):
        assert 1 <= bn254.random_scalar() < bn254.order


def test_n_jobs(monkeypatch):

    monkeypatch.delenv("QAPSNARK_PARALLEL_CPU", raising=False)
    assert get_n_jobs() == 1

    monkeypatch.setenv("QAPSNARK_PARALLEL_CPU", "4")
    assert get_n_jobs() == 4
