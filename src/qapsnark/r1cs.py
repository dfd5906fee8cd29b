import logging
from typing import Union

from .ecc import EllipticCurve
from .errors import InvalidWitnessError, UnknownVariableError, WitnessLengthError
from .matrix import hadamard, is_zero_vector, mat_vec, vec_sub
from .qap import QAP, to_qap

logger = logging.getLogger(__name__)

CONSTANT = "const"


class Variable:
    def __init__(self, index: int, name: str, kind: str):
        self.index = index
        self.name = name
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return (self.index, self.name, self.kind) == (
            other.index,
            other.name,
            other.kind,
        )

    __hash__ = None

    def __repr__(self):
        return f"Variable({self.index}, {self.name!r}, {self.kind!r})"


class R1CS:
    """
    Rank-1 constraint system built gate by gate.

    Variables are ordered `[const, inputs..., outputs..., intermediates...]`
    and each gate adds one row to the `left`, `right` and `out` matrices such
    that for a valid witness `s`: `(left . s) * (right . s) - (out . s) = 0`.

    Gates keep references by variable name, so the matrices always follow
    the final variable order even when variables are declared after gates.

    Args:
        curve: `BN254` or `BLS12_381`, defines the scalar field
    """

    def __init__(self, curve: str = "BN254"):
        self.curve = curve
        self.p = EllipticCurve(curve).order

        self.inputs = []
        self.outputs = []
        self.intermediates = []
        # one (left, right, out) triple of {name: coeff} rows per gate
        self.gates = []

    def __register(self, names: list, name: str):
        if name == CONSTANT or name in self.inputs + self.outputs + self.intermediates:
            raise ValueError(f"Variable {name} is already defined")
        names.append(name)

    def new_input(self, name: str):
        """Register a public input variable"""
        self.__register(self.inputs, name)

    def new_output(self, name: str):
        """Register a public output variable"""
        self.__register(self.outputs, name)

    def new_var(self, name: str):
        """Register an intermediate (private) variable"""
        self.__register(self.intermediates, name)

    @property
    def variables(self) -> list[Variable]:
        variables = [Variable(0, CONSTANT, "constant")]
        for kind, names in (
            ("input", self.inputs),
            ("output", self.outputs),
            ("intermediate", self.intermediates),
        ):
            for name in names:
                variables.append(Variable(len(variables), name, kind))

        return variables

    @property
    def names(self) -> list[str]:
        return [CONSTANT] + self.inputs + self.outputs + self.intermediates

    @property
    def n_vars(self) -> int:
        return 1 + len(self.inputs) + len(self.outputs) + len(self.intermediates)

    @property
    def n_io(self) -> int:
        """Number of variables known to the verifier: constant, inputs and outputs"""
        return 1 + len(self.inputs) + len(self.outputs)

    @property
    def n_gates(self) -> int:
        return len(self.gates)

    def index_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError as exc:
            raise UnknownVariableError(name) from exc

    def __row(self, *terms: tuple[str, int]) -> dict:
        row = {}
        for name, coeff in terms:
            self.index_of(name)
            row[name] = (row.get(name, 0) + coeff) % self.p
        return row

    def mul(self, left: str, right: str, out: str):
        """Add gate `left * right = out`"""
        self.gates.append(
            (
                self.__row((left, 1)),
                self.__row((right, 1)),
                self.__row((out, 1)),
            )
        )

    def add(self, a: str, b: str, out: str):
        """Add gate `(a + b) * 1 = out`"""
        self.gates.append(
            (
                self.__row((a, 1), (b, 1)),
                self.__row((CONSTANT, 1)),
                self.__row((out, 1)),
            )
        )

    def add_const(self, var: str, k: int, out: str):
        """Add gate `(k * 1 + var) * 1 = out`"""
        self.gates.append(
            (
                self.__row((CONSTANT, k), (var, 1)),
                self.__row((CONSTANT, 1)),
                self.__row((out, 1)),
            )
        )

    def __matrix(self, position: int) -> list:
        index = {name: i for i, name in enumerate(self.names)}
        matrix = []
        for gate in self.gates:
            row = [0] * len(index)
            for name, coeff in gate[position].items():
                row[index[name]] = coeff
            matrix.append(row)
        return matrix

    @property
    def left(self) -> list:
        return self.__matrix(0)

    @property
    def right(self) -> list:
        return self.__matrix(1)

    @property
    def out(self) -> list:
        return self.__matrix(2)

    def generate_witness(self, values: dict) -> list:
        """
        Build the witness vector in variable order from a mapping of
        variable names to values, the constant slot is always 1
        """
        witness = []
        for name in self.names:
            if name == CONSTANT:
                witness.append(1)
            elif name in values:
                witness.append(values[name] % self.p)
            else:
                raise ValueError(f"Missing value for variable {name}")

        return witness

    def split_witness(self, witness: list) -> tuple[list, list]:
        """Split witness into `(public, private)` parts"""
        if len(witness) != self.n_vars:
            raise WitnessLengthError(
                f"Witness of length {len(witness)} given for {self.n_vars} variables"
            )
        return witness[: self.n_io], witness[self.n_io :]

    def __dot(self, row: dict, values: dict) -> Union[int, None]:
        acc = 0
        for name, coeff in row.items():
            if name not in values:
                return None
            acc += coeff * values[name]
        return acc % self.p

    def solve(self, inputs: dict) -> list:
        """
        Evaluate gates in order from the input values
        and return the full witness vector

        Args:
            inputs: mapping of input variable names to values
        """
        values = {CONSTANT: 1}
        for name in self.inputs:
            if name not in inputs:
                raise ValueError(f"Missing value for input {name}")
            values[name] = inputs[name] % self.p

        for i, (left, right, out) in enumerate(self.gates):
            l = self.__dot(left, values)
            r = self.__dot(right, values)
            if l is None or r is None:
                raise ValueError(f"Gate {i} depends on a variable not computed yet")

            (target, coeff), *rest = out.items()
            if rest:
                raise ValueError(f"Gate {i} has more than one output variable")

            value = l * r * pow(coeff, -1, self.p) % self.p
            if target in values and values[target] != value:
                raise InvalidWitnessError(
                    f"Gate {i} assigns {value} to {target} already set to {values[target]}"
                )
            values[target] = value

        return self.generate_witness(values)

    def is_satisfied(self, witness: list) -> bool:
        """Check `Hadamard(left . s, right . s) - out . s == 0`"""
        if len(witness) != self.n_vars:
            raise WitnessLengthError(
                f"Witness of length {len(witness)} given for {self.n_vars} variables"
            )

        l = mat_vec(self.left, witness, self.p)
        r = mat_vec(self.right, witness, self.p)
        o = mat_vec(self.out, witness, self.p)

        return is_zero_vector(vec_sub(hadamard(l, r, self.p), o, self.p))

    def compile(self) -> QAP:
        """
        Compile R1CS into Quadratic Arithmetic Program (QAP)

        Returns:
            qap: QAP object of the constraint system
        """
        logger.debug(
            "Compiling R1CS with %d variables (%d public) and %d gates",
            self.n_vars,
            self.n_io,
            self.n_gates,
        )
        return to_qap(self)
