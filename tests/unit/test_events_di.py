"""
Tests for the EventBus and the DI container

Checks:
1. Type-based dispatch, unsubscribe
2. Handler isolation
3. Container registration, lazy singletons, overrides
"""


import pytest

from newrial.core.di import Container, container, register_default_services
from newrial.core.events import AmountEdited, DirectionSwapped, EventBus
from newrial.services.converter_service import ConverterService

# =============================================================================
# EVENT BUS
# =============================================================================


class TestEventBus:
    """Tests for EventBus"""

    def test_dispatch_by_type(self) -> None:
        bus = EventBus()
        got = []
        bus.subscribe(AmountEdited, got.append)
        bus.publish(AmountEdited(field="old", text="1"))
        bus.publish(DirectionSwapped())
        assert got == [AmountEdited(field="old", text="1")]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        got = []
        unsubscribe = bus.subscribe(DirectionSwapped, got.append)
        unsubscribe()
        unsubscribe()  # second call is a no-op
        bus.publish(DirectionSwapped())
        assert got == []

    def test_failing_handler_does_not_stop_others(self) -> None:
        bus = EventBus()
        got = []

        def boom(_evt) -> None:
            raise RuntimeError("boom")

        bus.subscribe(DirectionSwapped, boom)
        bus.subscribe(DirectionSwapped, got.append)
        bus.publish(DirectionSwapped())
        assert len(got) == 1


# =============================================================================
# CONTAINER
# =============================================================================


class TestContainer:
    """Tests for Container"""

    def test_lazy_singleton(self) -> None:
        c = Container()
        calls = []
        c.register("x", lambda: calls.append(1) or object())
        assert calls == []
        assert c.resolve("x") is c.resolve("x")
        assert calls == [1]

    def test_duplicate_registration_rejected(self) -> None:
        c = Container()
        c.register("x", object)
        with pytest.raises(KeyError):
            c.register("x", object)

    def test_override_drops_instance(self) -> None:
        c = Container()
        c.register("x", object)
        first = c.resolve("x")
        c.register("x", object, override=True)
        assert c.resolve("x") is not first

    def test_non_callable_factory(self) -> None:
        with pytest.raises(TypeError):
            Container().register("x", 42)  # type: ignore[arg-type]

    def test_resolve_missing(self) -> None:
        with pytest.raises(KeyError):
            Container().resolve("nope")

    def test_default_services(self) -> None:
        register_default_services(override=True)
        converter = container.resolve("converter")
        assert isinstance(converter, ConverterService)
        assert converter.bus is container.resolve("bus")
        assert converter.settings is container.resolve("settings")
