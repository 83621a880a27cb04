"""
Interactive console for two square matrices.

Asks for two matrices, then offers a menu: run a demonstration, or apply
arithmetic and sum-based comparisons to the matrices that were entered.
"""

import sys
from typing import Callable, Optional, TextIO

from .errors import MatrixError
from .matrix import SUM_COMPARISONS, SquareMatrix, add, multiply, subtract

DEMO_SIDE = 3

MAIN_MENU = (
    "Choose an action:\n"
    "1 - Run the demonstration\n"
    "2 - Operate on the matrices\n"
    "0 - Exit\n"
    "Enter a number: "
)

OPERATIONS_MENU = (
    "Available operations: +, -, *, >, >=, <, <=, ==, !=, 0 - back\n"
    "Enter an operation: "
)

ARITHMETIC = {
    "+": ("addition", add),
    "-": ("subtraction", subtract),
    "*": ("multiplication", multiply),
}


class MatrixConsole:
    """
    Menu-driven front end over SquareMatrix.

    Input comes from `input_func` (called with the prompt, like `input`) and
    everything else is written to `output`. Errors raised by the matrices are
    reported to the user and the session carries on.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        rng=None,
    ):
        self.input_func = input_func
        self.output = output or sys.stdout
        self.rng = rng

    def write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output)

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def read_int(self, prompt: str) -> int:
        while True:
            answer = self.ask(prompt)
            try:
                return int(answer)
            except ValueError:
                self.write(f"Not an integer: {answer!r}")

    def read_matrix(self, label: str) -> SquareMatrix:
        side = self.read_int(f"Enter the side of matrix {label} (one number, the matrix is square): ")
        while side < 1:
            self.write("The side must be at least 1")
            side = self.read_int(f"Enter the side of matrix {label}: ")

        elements = [
            self.read_int(f"Enter element {index + 1} of the matrix: ")
            for index in range(side * side)
        ]
        matrix = SquareMatrix.from_flat(elements)

        self.write(f"Matrix {label} created:")
        self.write(matrix.render(), end="")
        return matrix

    def run(self) -> int:
        """Run a full session. Returns the exit status."""
        try:
            first = self.read_matrix("1")
            second = self.read_matrix("2")

            while True:
                choice = self.ask(MAIN_MENU)
                if choice == "0":
                    break
                if choice == "1":
                    self.demo()
                elif choice == "2":
                    self.operations(first, second)
        except EOFError:
            self.write()

        self.write("Session finished.")
        return 0

    def operations(self, first: SquareMatrix, second: SquareMatrix) -> None:
        while True:
            operation = self.ask(OPERATIONS_MENU)
            if operation == "0":
                return

            if operation in ARITHMETIC:
                label, function = ARITHMETIC[operation]
                try:
                    result = function(first, second)
                except MatrixError as e:
                    self.write(f"Error: {e}")
                    continue
                self.write(f"Result of {label}:")
                self.write(result.render())
            elif operation in SUM_COMPARISONS:
                outcome = SUM_COMPARISONS[operation](first, second)
                self.write(f"Matrix 1 {operation} Matrix 2: {outcome}")
            else:
                self.write("Operation is not implemented")

    def demo(self) -> None:
        """Show every operation on random and fixed matrices."""
        matrices = []
        for _ in range(2):
            self.write(f"Random {DEMO_SIDE}x{DEMO_SIDE} matrix:")
            matrix = SquareMatrix.random(DEMO_SIDE, rng=self.rng)
            self.write(matrix.render(), end="")
            matrices.append(matrix)

        self.write("\nArithmetic")
        for symbol, (label, function) in ARITHMETIC.items():
            self.write(f"\nResult of {label} ({symbol}):")
            self.write(function(*matrices).render(), end="")

        self.write("\nSum-based comparisons")
        named = {
            "minor": SquareMatrix.from_flat([0, 1, 2, 3]),
            "major": SquareMatrix.from_flat([1, 2, 3, 4]),
            "equal": SquareMatrix.from_flat([0, 1, 2, 3]),
        }
        for name, matrix in named.items():
            self.write(f"\n{name}:")
            self.write(matrix.render(), end="")

        pairs = [("major", "minor"), ("minor", "major"), ("minor", "equal")]
        for symbol in (">", "<"):
            for left, right in pairs:
                outcome = SUM_COMPARISONS[symbol](named[left], named[right])
                self.write(f"{left} {symbol} {right}: {outcome}")
        for left, right in [("minor", "major"), ("minor", "equal")]:
            for symbol in ("==", "!="):
                outcome = SUM_COMPARISONS[symbol](named[left], named[right])
                self.write(f"{left} {symbol} {right}: {outcome}")

        self.write("\nConversions")
        self.write("\nMatrix -> grid:")
        self.write(str(named["minor"].to_grid()))
        self.write("\nMatrix -> text:")
        self.write(str(named["major"]))
        self.write("Flat list -> matrix:")
        self.write(SquareMatrix.from_flat([0, 1, 2, 3]).render())


def main():
    """Entry point for the square-matrix console script."""
    console = MatrixConsole()
    try:
        sys.exit(console.run())
    except KeyboardInterrupt:
        print("\n[square-matrix] Shutting down...", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
