import math
from typing import Sequence
import numpy as np
from .base import IFunction

DTYPE = np.float64

class PolynomialFunction(IFunction):
    """
    Polynomial given by its coefficients, index = power of x:
        f(x) = c0 + c1*x + c2*x^2 + ...
    An empty sequence is the zero function.
    """
    def __init__(self, coefficients: Sequence[float]) -> None:
        coeffs = np.array(coefficients, dtype=DTYPE).ravel()
        coeffs.setflags(write=False)
        self._coefficients = coeffs
        self._terms = tuple(float(c) for c in coeffs)

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def evaluate(self, x: float) -> float:
        x = float(x)
        result = 0.0
        for i, c in enumerate(self._terms):
            try:
                p = x ** i
            except OverflowError:
                # overflow goes to inf, not an error
                p = -math.inf if x < 0 and i % 2 else math.inf
            result += c * p
        return result

    def __repr__(self) -> str:
        return f"PolynomialFunction({self._coefficients.tolist()})"
