"""Unit tests for the Usage telemetry counters

Test coverage includes:
    1. Counters start at zero and increase by one per increment.
    2. Counter names follow the namespace.
    3. Independent instances do not share registries.
"""

from prometheus_client import CollectorRegistry

from urlstore.telemetry import Usage


def test_counters_start_at_zero():
    usage = Usage()
    assert usage.inserted() == 0
    assert usage.fetched() == 0


def test_counters_increment():
    usage = Usage()
    usage.inserted_counter.inc()
    usage.inserted_counter.inc()
    usage.fetched_counter.inc()

    assert usage.inserted() == 2
    assert usage.fetched() == 1


def test_counter_names_follow_namespace():
    registry = CollectorRegistry()
    usage = Usage(namespace='links', registry=registry)
    usage.fetched_counter.inc()

    assert registry.get_sample_value('links_fetched_total') == 1
    assert registry.get_sample_value('links_inserted_total') == 0


def test_instances_are_independent():
    first, second = Usage(), Usage()
    first.inserted_counter.inc()

    assert first.inserted() == 1
    assert second.inserted() == 0
