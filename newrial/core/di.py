# newrial/core/di.py
# -*- coding: utf-8 -*-
"""
Dependency Injection (DI) container for NewRial.

Responsibilities
----------------
- Provide a tiny, explicit DI container with lazy singletons.
- Centralize wiring of app services (bus, settings, converter).
- Keep UI adapters decoupled from construction details & concrete modules.

Usage
-----
    from newrial.core.di import container, register_default_services

    register_default_services()  # once at startup (e.g., in main.py)

    bus       = container.resolve("bus")
    settings  = container.resolve("settings")
    converter = container.resolve("converter")
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional


# ---------- Minimal DI Container ----------

class Container:
    """A minimal DI container with lazy, singleton-like instances."""
    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, name: str, factory: Callable[[], Any], *, override: bool = False) -> None:
        """
        Register a factory under a unique name.

        Parameters
        ----------
        name : str
            Service name.
        factory : Callable[[], Any]
            Zero-argument callable returning a new instance.
        override : bool
            If True, replace existing registration and drop any cached instance.
        """
        if not callable(factory):
            raise TypeError(f"Factory for '{name}' must be callable.")
        if name in self._factories and not override:
            raise KeyError(f"Service already registered: {name}")
        self._factories[name] = factory
        self._instances.pop(name, None)

    def resolve(self, name: str) -> Any:
        """Return the (possibly newly constructed) instance for a registered service."""
        if name in self._instances:
            return self._instances[name]
        if name not in self._factories:
            raise KeyError(f"Service not registered: {name}")
        instance = self._factories[name]()
        self._instances[name] = instance
        return instance


# Global container instance
container = Container()


def register_default_services(*, override: bool = False) -> None:
    """
    Register core app services into the global container.

    Registered Names
    ----------------
    - "bus"       -> EventBus()
    - "settings"  -> SettingsManager()
    - "converter" -> ConverterService(bus, settings)
    """
    # Local imports to avoid import-cycles at module import time
    from newrial.core.events import EventBus
    from newrial.config.settings import SettingsManager
    from newrial.services.converter_service import ConverterService

    container.register("bus", lambda: EventBus(), override=override)
    container.register("settings", lambda: SettingsManager(), override=override)
    container.register(
        "converter",
        lambda: ConverterService(container.resolve("bus"), container.resolve("settings")),
        override=override,
    )
