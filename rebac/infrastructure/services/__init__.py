"""Infrastructure implementations of application service interfaces."""

from rebac.infrastructure.services.decision_store import SqlDecisionStore

__all__ = ["SqlDecisionStore"]
