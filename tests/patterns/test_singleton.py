"""Tests for the Singleton demo."""

from pattern_catalog.infrastructure.patterns.singleton_holder import SingletonHolder
from pattern_catalog.patterns import singleton
from pattern_catalog.patterns.singleton import ConnectionPool, concurrent_access, counting_factory


class TestSingletonDemo:
    """Test the shared connection pool."""

    def test_hundred_concurrent_first_accesses(self):
        """Test 100 concurrent callers see one instance built exactly once."""
        constructions = []
        holder = SingletonHolder(counting_factory(constructions))

        instances = concurrent_access(holder, callers=100)

        assert len(instances) == 100
        assert all(instance is instances[0] for instance in instances)
        assert isinstance(instances[0], ConnectionPool)
        assert len(constructions) == 1

    def test_run_output(self):
        assert singleton.run() == [
            "Instance created before first access: False",
            "First and second access return the same pool: True",
            "Distinct instances seen by 10 concurrent callers: 1",
            "Constructor calls: 1",
        ]
