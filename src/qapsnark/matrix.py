"""Dense matrix and vector helpers over Fp"""


def transpose(m: list) -> list:
    """Transpose matrix `m`, rows become columns"""
    if not m:
        return []
    return [[row[i] for row in m] for i in range(len(m[0]))]


def mat_vec(m: list, v: list, p: int) -> list:
    """Matrix-vector product `m . v` over Fp"""
    return [sum(a * b for a, b in zip(row, v)) % p for row in m]


def hadamard(a: list, b: list, p: int) -> list:
    """Element-wise product of two vectors over Fp"""
    return [x * y % p for x, y in zip(a, b)]


def vec_sub(a: list, b: list, p: int) -> list:
    return [(x - y) % p for x, y in zip(a, b)]


def is_zero_vector(v: list) -> bool:
    return all(x == 0 for x in v)
