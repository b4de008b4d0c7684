import threading
from dataclasses import dataclass
from typing import List, Optional, Union
from absl import logging
from integrand.base import IFunction
from quadrature.base import IIntegrationRule
from notifier.observer import ISubject, ResultCallback, Subscription

class StrategyNotSetError(RuntimeError):
    """calculate() was called before any integration strategy was installed."""

@dataclass(frozen=True)
class CalculationResult:
    value: Optional[float] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

class Calculator(ISubject):
    """
    Observable integral calculator.
      - holds the active integration strategy (unset until set_strategy)
      - integrates a function over [lower, upper] with it
      - pushes every result to the subscribed observers, in subscription order
    """
    _instance: Optional["Calculator"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._strategy: Optional[IIntegrationRule] = None
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "Calculator":
        """Process-wide default calculator, created on first access."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    # ---- Strategy ----
    @property
    def strategy(self) -> Optional[IIntegrationRule]:
        return self._strategy

    @property
    def is_ready(self) -> bool:
        return self._strategy is not None

    def set_strategy(self, strategy: IIntegrationRule) -> None:
        with self._lock:
            self._strategy = strategy
        logging.debug("[Calculator] Strategy set to %s", type(strategy).__name__)

    # ---- Subject API ----
    def subscribe(self, observer: ResultCallback) -> Subscription:
        sub = Subscription(observer)
        with self._lock:
            self._subscriptions.append(sub)
        return sub

    def unsubscribe(self, observer: Union[ResultCallback, Subscription]) -> None:
        with self._lock:
            for i, sub in enumerate(self._subscriptions):
                if isinstance(observer, Subscription):
                    found = sub is observer
                else:
                    found = sub.callback == observer
                if found:
                    del self._subscriptions[i]
                    return

    def notify(self, result: float) -> None:
        with self._lock:
            subs = list(self._subscriptions)
        for sub in subs:
            try:
                sub.callback(result)
            except Exception as e:
                logging.error("[Calculator] Observer %r failed: %s", sub.callback, e)

    # ---- Calculation ----
    def calculate(self, function: IFunction, lower: float, upper: float) -> float:
        with self._lock:
            strategy = self._strategy
        if strategy is None:
            raise StrategyNotSetError("Integration strategy is not set.")

        result = strategy.integrate(function, lower, upper)
        logging.debug("[Calculator] %r over [%s, %s] = %s", function, lower, upper, result)
        self.notify(result)
        return result

    def try_calculate(self, function: IFunction, lower: float, upper: float) -> CalculationResult:
        try:
            return CalculationResult(value=self.calculate(function, lower, upper))
        except StrategyNotSetError as e:
            return CalculationResult(error=e)
