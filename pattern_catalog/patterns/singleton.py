"""Singleton pattern - one shared connection pool, even under concurrent first access."""
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List

from pattern_catalog.domain.demo import PatternCategory, PatternDemo
from pattern_catalog.infrastructure.patterns.singleton_holder import SingletonHolder


class ConnectionPool:
    """Expensive shared resource."""

    def __init__(self, size: int = 5):
        self.size = size


def counting_factory(constructions: List[ConnectionPool]) -> Callable[[], ConnectionPool]:
    """Factory that records every pool it constructs."""
    def create() -> ConnectionPool:
        pool = ConnectionPool()
        constructions.append(pool)
        return pool
    return create


def concurrent_access(holder: SingletonHolder, callers: int) -> List[object]:
    """Have ``callers`` threads hit ``holder.get()`` at the same moment."""
    barrier = threading.Barrier(callers)

    def access():
        barrier.wait()
        return holder.get()

    with ThreadPoolExecutor(max_workers=callers) as executor:
        futures = [executor.submit(access) for _ in range(callers)]
        return [future.result() for future in futures]


def run() -> List[str]:
    holder = SingletonHolder(ConnectionPool)
    lines = [f"Instance created before first access: {holder.is_initialized}"]

    first = holder.get()
    second = holder.get()
    lines.append(f"First and second access return the same pool: {first is second}")

    constructions: List[ConnectionPool] = []
    shared = SingletonHolder(counting_factory(constructions))
    instances = concurrent_access(shared, callers=10)
    lines.append(f"Distinct instances seen by 10 concurrent callers: {len({id(i) for i in instances})}")
    lines.append(f"Constructor calls: {len(constructions)}")
    return lines


DEMO = PatternDemo(
    name="singleton",
    category=PatternCategory.CREATIONAL,
    description=(
        "A lazily created, globally reachable instance. The first access "
        "creates it and every later access, including concurrent first "
        "accesses, returns the identical object. Creation is guarded by "
        "double-checked locking so it happens at most once."
    ),
    run=run,
)
