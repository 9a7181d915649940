"""Usage telemetry for the URL store

Two monotonically increasing Prometheus counters:

    <namespace>_inserted_total   records inserted by URLStore.set()
    <namespace>_fetched_total    records fetched by URLStore.get()

A Usage instance is injected into URLStore. By default each instance owns a
private CollectorRegistry, so several stores (or tests) can coexist without
duplicate metric registration. Pass `registry=prometheus_client.REGISTRY` to
expose the counters on the process-wide registry.

Example:
    >>> usage = Usage()
    >>> usage.inserted_counter.inc()
    >>> usage.inserted()
    1.0
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter

from urlstore.constants import Telemetry


class Usage:
    """Inserted/fetched counters backed by prometheus_client.

    Attributes:
        inserted_counter (Counter): incremented on every successful insert.
        fetched_counter (Counter): incremented on every successful fetch.
        registry (CollectorRegistry): registry holding both counters.
    """

    def __init__(self, namespace: str = Telemetry.NAMESPACE, registry: Optional[CollectorRegistry] = None):
        self.namespace = namespace
        self.registry = registry if registry is not None else CollectorRegistry()
        self.inserted_counter = Counter(
            f'{namespace}_inserted',
            'Number of records inserted into the URL store',
            registry=self.registry,
        )
        self.fetched_counter = Counter(
            f'{namespace}_fetched',
            'Number of records fetched from the URL store',
            registry=self.registry,
        )

    def inserted(self) -> float:
        return self._read(f'{self.namespace}_inserted_total')

    def fetched(self) -> float:
        return self._read(f'{self.namespace}_fetched_total')

    def _read(self, sample: str) -> float:
        return self.registry.get_sample_value(sample) or 0.0
