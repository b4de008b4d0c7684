from abc import ABC, abstractmethod
from typing import Dict, NamedTuple
from quadrature.base import IIntegrationRule
from quadrature.rectangle import RectangleRule
from quadrature.gauss_legendre import GaussLegendreRule, DEFAULT_ORDER

class IIntegrationRuleFactory(ABC):
    @abstractmethod
    def create_rule(self) -> IIntegrationRule: ...

class RectangleRuleFactory(IIntegrationRuleFactory):
    def create_rule(self) -> IIntegrationRule:
        return RectangleRule()

class GaussLegendreRuleFactory(IIntegrationRuleFactory):
    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        self.order = order

    def create_rule(self) -> IIntegrationRule:
        return GaussLegendreRule(order=self.order)

class RuleChoice(NamedTuple):
    label: str
    factory: IIntegrationRuleFactory

def build_rule_choices(gauss_order: int = DEFAULT_ORDER) -> Dict[str, RuleChoice]:
    """Menu key -> rule, in display order."""
    return {
        "1": RuleChoice("Rectangle Integration", RectangleRuleFactory()),
        "2": RuleChoice("Gauss-Legendre Integration", GaussLegendreRuleFactory(gauss_order)),
    }

RULE_FACTORIES = build_rule_choices()
