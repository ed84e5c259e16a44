"""Capability registry.

Host applications register their data-retrieval capabilities at startup;
the selector describes them to the reasoning backend and the executor
resolves proposed calls against them by name.
"""

from typing import Dict, Iterator, List, Optional
import logging

from .base import Capability

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    """Registry of capabilities keyed by name, in registration order."""

    def __init__(self, capabilities: Optional[List[Capability]] = None):
        self._capabilities: Dict[str, Capability] = {}
        for capability in capabilities or []:
            self.register(capability)

    def register(self, capability: Capability) -> None:
        """Register a capability instance.

        Args:
            capability: Capability to register

        Raises:
            ValueError: If a capability with the same name is registered
            TypeError: If it does not implement the Capability interface
        """
        if not isinstance(capability, Capability):
            raise TypeError(
                f"Capability must inherit from Capability base class, got {type(capability)}"
            )

        if capability.name in self._capabilities:
            raise ValueError(f"Capability '{capability.name}' already registered")

        self._capabilities[capability.name] = capability
        logger.info(f"Registered capability '{capability.name}'")

    def get(self, name: str) -> Optional[Capability]:
        """Get a registered capability by name, or None if not found."""
        return self._capabilities.get(name)

    def has(self, name: str) -> bool:
        return name in self._capabilities

    def names(self) -> List[str]:
        return list(self._capabilities)

    def list(self) -> Dict[str, str]:
        """Map capability names to their descriptions."""
        return {
            name: capability.description
            for name, capability in self._capabilities.items()
        }

    def unregister(self, name: str) -> bool:
        """Unregister a capability (mainly for testing).

        Returns:
            True if it was unregistered, False if not found
        """
        if name in self._capabilities:
            del self._capabilities[name]
            logger.info(f"Unregistered capability '{name}'")
            return True
        return False

    def clear(self) -> None:
        """Clear all registered capabilities (mainly for testing)."""
        self._capabilities.clear()
        logger.info("Cleared all registered capabilities")

    def __iter__(self) -> Iterator[Capability]:
        return iter(list(self._capabilities.values()))

    def __len__(self) -> int:
        return len(self._capabilities)

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities


# Global registry instance
_global_registry = CapabilityRegistry()


def get_global_registry() -> CapabilityRegistry:
    """Get the global capability registry instance."""
    return _global_registry
