"""System loader: imports, instantiates and orders pluggable systems.

The loader imports every module in INSTALLED_SYSTEMS (which registers the
systems they define), creates one instance per registered system belonging to
those modules, and sorts the instances so that every system comes after the
systems it depends on. All lifecycle fan-out (setup, update, draw, input,
cleanup) goes through the loader so the order is the same everywhere.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from roomwalk.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from roomwalk.systems.base import BaseSystem
    from roomwalk.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """Raised when a system depends on a system that is not installed."""


class CircularDependencyError(Exception):
    """Raised when system dependencies form a cycle."""


class SystemLoader:
    """Loads installed systems and dispatches lifecycle calls in dependency order.

    Attributes:
        installed_systems: Module paths whose systems should be loaded.
        systems: Instantiated systems keyed by name, in dependency order.
    """

    def __init__(self, installed_systems: list[str]) -> None:
        """Initialize the loader.

        Args:
            installed_systems: Module paths to import (e.g. "roomwalk.systems.player").
        """
        self.installed_systems = list(installed_systems)
        self.systems: dict[str, BaseSystem] = {}

    def instantiate_all(self) -> dict[str, BaseSystem]:
        """Import installed modules and instantiate their systems in dependency order.

        Returns:
            Dictionary of system name to instance, ordered so dependencies come first.

        Raises:
            MissingDependencyError: A system depends on a name that is not loaded.
            CircularDependencyError: The dependency graph has a cycle.
        """
        for module_path in self.installed_systems:
            importlib.import_module(module_path)

        # Installation order decides ties, so world drawing follows INSTALLED_SYSTEMS
        registered = SystemRegistry.get_all()
        classes: dict[str, type[BaseSystem]] = {}
        for module_path in self.installed_systems:
            for name, system_class in registered.items():
                if name not in classes and self._belongs_to(system_class.__module__, module_path):
                    classes[name] = system_class

        ordered = self._resolve_order(classes)
        self.systems = {name: classes[name]() for name in ordered}
        logger.debug("Loaded systems: %s", ", ".join(self.systems))
        return self.systems

    def setup_all(self, context: GameContext) -> None:
        """Call setup() on every system in dependency order."""
        for system in self.systems.values():
            system.setup(context)

    def update_all(self, delta_time: float, context: GameContext) -> None:
        """Call update() on every system in dependency order."""
        for system in self.systems.values():
            system.update(delta_time, context)

    def draw_all(self, context: GameContext) -> None:
        """Call on_draw() on every system in dependency order."""
        for system in self.systems.values():
            system.on_draw(context)

    def draw_ui_all(self, context: GameContext) -> None:
        """Call on_draw_ui() on every system in dependency order."""
        for system in self.systems.values():
            system.on_draw_ui(context)

    def on_key_press_all(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Offer a key press to each system until one consumes it."""
        return any(system.on_key_press(symbol, modifiers, context) for system in self.systems.values())

    def on_key_release_all(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Offer a key release to each system until one consumes it."""
        return any(system.on_key_release(symbol, modifiers, context) for system in self.systems.values())

    def cleanup_all(self) -> None:
        """Call cleanup() on every system in reverse dependency order."""
        for system in reversed(list(self.systems.values())):
            system.cleanup()

    @staticmethod
    def _belongs_to(module_name: str, module_path: str) -> bool:
        return module_name == module_path or module_name.startswith(module_path + ".")

    def _resolve_order(self, classes: dict[str, type[BaseSystem]]) -> list[str]:
        """Depth-first topological sort keeping installation order where possible."""
        ordered: list[str] = []
        visiting: set[str] = set()

        def visit(name: str, chain: list[str]) -> None:
            if name in ordered:
                return
            if name in visiting:
                msg = "Circular system dependency: " + " -> ".join([*chain, name])
                raise CircularDependencyError(msg)
            visiting.add(name)
            for dependency in classes[name].dependencies:
                if dependency not in classes:
                    msg = f"System '{name}' depends on '{dependency}', which is not installed"
                    raise MissingDependencyError(msg)
                visit(dependency, [*chain, name])
            visiting.discard(name)
            ordered.append(name)

        for name in classes:
            visit(name, [])
        return ordered
