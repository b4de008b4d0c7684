from integrand.base import IFunction
from .base import IIntegrationRule

RECTANGLE_STEP = 0.001

class RectangleRule(IIntegrationRule):
    """
    Left-endpoint Riemann sum with a fixed step.

    Walks x from `lower` by `step` while x < upper. Reversed or empty
    intervals give 0.0; the last partial strip is not rescaled.
    Stops early once x is too large for the step to advance it.
    """
    def __init__(self, step: float = RECTANGLE_STEP) -> None:
        self.step = step

    def integrate(self, function: IFunction, lower: float, upper: float) -> float:
        h = self.step
        result = 0.0
        x = float(lower)
        while x < upper:
            result += function.evaluate(x) * h
            nxt = x + h
            if nxt == x:
                break
            x = nxt
        return result
