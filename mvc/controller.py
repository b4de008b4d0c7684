import math
from typing import Callable, Dict, List, Optional
from absl import logging
from factories.function_factory import IFunctionFactory, PolynomialFunctionFactory
from factories.rule_factory import RuleChoice, RULE_FACTORIES
from mvc.model import Calculator
from notifier.observer import ResultCallback

class ConsoleController:
    """
    Controller:
      - prompts for coefficients, bounds and integration method
      - builds the function and the rule through the factories
      - installs the rule, subscribes the view for the duration of the run
      - reports parse/selection/calculation errors instead of raising
    """
    def __init__(self,
                 model: Calculator,
                 view: ResultCallback,
                 function_factory: Optional[IFunctionFactory] = None,
                 choices: Optional[Dict[str, RuleChoice]] = None,
                 read_line: Optional[Callable[[], str]] = None,
                 write_line: Callable[[str], None] = print) -> None:
        self.model = model
        self.view = view
        self.function_factory = function_factory or PolynomialFunctionFactory()
        self.choices = choices if choices is not None else RULE_FACTORIES
        self.read_line = read_line or input
        self.write_line = write_line

    def _ask(self, prompt: str) -> str:
        self.write_line(prompt)
        return self.read_line().strip()

    def _read_coefficients(self) -> List[float]:
        text = self._ask("Enter the coefficients of the polynomial function (separated by spaces):")
        return [float(tok) for tok in text.split()]

    def _read_bound(self, which: str) -> float:
        value = float(self._ask(f"Enter the {which} bound:"))
        if not math.isfinite(value):
            raise ValueError(f"{which} bound must be finite, got {value}")
        return value

    def _select_rule(self) -> Optional[RuleChoice]:
        self.write_line("Select an integration method:")
        for key, choice in self.choices.items():
            self.write_line(f"{key}. {choice.label}")
        return self.choices.get(self.read_line().strip())

    def run(self) -> Optional[float]:
        try:
            coefficients = self._read_coefficients()
            lower = self._read_bound("lower")
            upper = self._read_bound("upper")
        except ValueError as e:
            logging.warning("Controller: bad numeric input: %s", e)
            self.write_line(f"Error: {e}")
            return None

        function = self.function_factory.create_function(coefficients)

        choice = self._select_rule()
        if choice is None:
            self.write_line("Invalid choice.")
            return None
        self.model.set_strategy(choice.factory.create_rule())

        sub = self.model.subscribe(self.view)
        try:
            outcome = self.model.try_calculate(function, lower, upper)
        finally:
            self.model.unsubscribe(sub)

        if not outcome.ok:
            logging.error("Controller: calculation failed: %s", outcome.error)
            self.write_line(f"Error: {outcome.error}")
            return None
        return outcome.value
