# app.py
from absl import logging as absl_logging
from mvc.model import Calculator
from mvc.view import ConsoleView
from mvc.controller import ConsoleController
from factories.function_factory import PolynomialFunctionFactory
from factories.rule_factory import build_rule_choices

LOG_VERBOSITY = absl_logging.WARNING
GAUSS_LEGENDRE_ORDER = 20

def main() -> None:
    absl_logging.set_verbosity(LOG_VERBOSITY)

    # Model
    calculator = Calculator()

    # View (Observer)
    console_view = ConsoleView()

    # Controller (Strategy chosen by the user from the factories)
    ctrl = ConsoleController(
        model=calculator,
        view=console_view,
        function_factory=PolynomialFunctionFactory(),
        choices=build_rule_choices(gauss_order=GAUSS_LEGENDRE_ORDER),
    )

    try:
        ctrl.run()
    except (KeyboardInterrupt, EOFError):
        print()

if __name__ == "__main__":
    main()
