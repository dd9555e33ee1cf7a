"""Explain mode — structured insight into authorization decisions."""

from scout_authz.explain._decision import explain_decision
from scout_authz.explain._models import DecisionExplanation

__all__ = ["DecisionExplanation", "explain_decision"]
