"""Data models for explain output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["DecisionExplanation"]


@dataclass(frozen=True, slots=True)
class DecisionExplanation:
    """Explanation of why an actor can or cannot perform an operation.

    Attributes:
        operation: The operation identifier that was checked.
        actor_repr: String representation of the actor.
        role: The actor's role value.
        status: The actor's account status value.
        allowed: The verdict.
        stage: The dispatcher step that settled the verdict.
        rule: Description of the rule applied (empty if none applied).
        reason: Short explanation of the outcome.
        facts: The resource facts the decision was made on.
    """

    operation: str
    actor_repr: str
    role: str
    status: str
    allowed: bool
    stage: str
    rule: str
    reason: str
    facts: dict[str, Any] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "operation": self.operation,
            "actor_repr": self.actor_repr,
            "role": self.role,
            "status": self.status,
            "allowed": self.allowed,
            "stage": self.stage,
            "rule": self.rule,
            "reason": self.reason,
            "facts": dict(self.facts),
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line explanation."""
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines: list[str] = []
        lines.append(f"Access Check: {verdict}")
        lines.append(f"  Actor: {self.actor_repr} (role={self.role}, status={self.status})")
        lines.append(f"  Operation: {self.operation}")
        if self.stage == "invalid_status":
            lines.append("  DENIED BY STATUS GATE (account is not active)")
        elif self.stage == "unknown_operation":
            lines.append("  DENY BY DEFAULT (operation is not in the catalog)")
        else:
            lines.append(f"  Rule: {self.rule}")
        lines.append(f"  Reason: {self.reason}")
        set_facts = {k: v for k, v in self.facts.items() if v not in (None, False)}
        if set_facts:
            lines.append("  Facts:")
            for key, value in set_facts.items():
                lines.append(f"    - {key}: {value}")
        return "\n".join(lines)
