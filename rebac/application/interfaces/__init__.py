"""Application interfaces (ports) implemented by infrastructure."""

from rebac.application.interfaces.services import (
    IDecisionCache,
    IDecisionStore,
    IKeyValueStore,
)

__all__ = ["IDecisionCache", "IDecisionStore", "IKeyValueStore"]
