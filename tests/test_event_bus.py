"""
Tests for the shared EventBus
"""

import pytest

from dispatch import config
from dispatch import DispatchHost, FallbackProvider, UnhandledHandlerError
from dispatch.utils import EventBus


def test_new_bus_has_no_registry():
    bus = EventBus()
    assert bus.event_handlers() is None
    assert bus.invoke_event('anything') is None


def test_bus_satisfies_dispatch_capabilities():
    bus = EventBus()
    assert isinstance(bus, DispatchHost)
    assert isinstance(bus, FallbackProvider)


def test_components_share_a_bus():
    bus = EventBus()
    received = []

    class Producer:
        def __init__(self, bus):
            self.bus = bus

        def produce(self, value):
            return self.bus.invoke_event('value', value)

    class Consumer:
        def __init__(self, bus):
            bus.add_handler_for_event('value', self.on_value)

        def on_value(self, host, value):
            received.append((host, value))
            return True

    producer = Producer(bus)
    Consumer(bus)
    Consumer(bus)

    assert producer.produce(5) is bus
    assert received == [(bus, 5), (bus, 5)]


def test_buses_are_independent():
    first, second = EventBus(), EventBus()
    calls = []
    first.add_handler_for_event('tick', lambda host: calls.append(host) or True)

    assert second.invoke_event('tick') is None
    assert first.invoke_event('tick') is first
    assert calls == [first]


def test_bus_error_event():
    bus = EventBus()
    errors = []

    def broken(host):
        raise RuntimeError('broken')

    bus.add_handler_for_event(
        'tick', broken,
        config.ERROR_EVENT, lambda host, error: errors.append(error) or True,
    )

    assert bus.invoke_event('tick') is bus
    assert [str(error) for error in errors] == ['broken']
    assert 'tick' not in bus.event_handlers()


def test_bus_without_error_handler_raises():
    bus = EventBus()
    bus.add_handler_for_event('tick', lambda host: 1 / 0)

    with pytest.raises(UnhandledHandlerError) as excinfo:
        bus.invoke_event('tick')
    assert isinstance(excinfo.value.original, ZeroDivisionError)


def test_clear_bus():
    bus = EventBus()
    bus.add_handler_for_event('a', lambda host: True)

    assert bus.clear_event_handlers() is bus
    assert bus.event_handlers() == {}
    assert bus.invoke_event('a') is None
