"""Tests for the cache primitives — keys, TTL store, singleflight."""

import asyncio

import pytest

from quizgen.cache import SingleFlight, TTLStore, build_key, context_key, quiz_key
from quizgen.orchestrator.schemas import QuizRequest


class TestCacheKeyGeneration:
    def test_build_key_deterministic(self):
        assert build_key("es", "5A", "Ciencias", topic="Fotosíntesis") == build_key(
            "es", "5A", "Ciencias", topic="Fotosíntesis"
        )

    def test_build_key_prefix(self):
        assert build_key("es", topic="x").startswith("qz:")

    def test_topic_is_trimmed_and_case_folded(self):
        key1 = build_key("es", "5A", "Ciencias", topic="Fotosíntesis")
        key2 = build_key("es", "5A", "Ciencias", topic="  FOTOSÍNTESIS ")
        assert key1 == key2

    def test_other_fields_trimmed_but_case_sensitive(self):
        assert build_key(" 5A ", topic="t") == build_key("5A", topic="t")
        assert build_key("5A", topic="t") != build_key("5a", topic="t")

    def test_none_is_empty_string(self):
        assert build_key(None, "x") == build_key("", "x")
        assert build_key("  ", "x") == build_key("", "x")

    def test_any_field_change_changes_key(self):
        base = ("es", "5A", "Ciencias")
        key = build_key(*base, topic="célula")
        assert build_key("en", "5A", "Ciencias", topic="célula") != key
        assert build_key("es", "5B", "Ciencias", topic="célula") != key
        assert build_key("es", "5A", "Historia", topic="célula") != key
        assert build_key(*base, topic="células") != key

    def test_field_order_matters(self):
        assert build_key("a", "b") != build_key("b", "a")

    def test_separator_inside_field_does_not_collide(self):
        assert build_key("a|b", "c") != build_key("a", "b|c")

    def test_quiz_key_equal_for_semantically_equal_requests(self):
        r1 = QuizRequest(language="es", course_name="5A", book_title="Ciencias", topic="Fotosíntesis")
        r2 = QuizRequest(language="es", course_name=" 5A", book_title="Ciencias ", topic="fotosíntesis  ")
        assert quiz_key(r1) == quiz_key(r2)

    def test_context_key_ignores_language(self):
        r1 = QuizRequest(language="es", course_name="5A", book_title="Ciencias", topic="Célula")
        r2 = QuizRequest(language="en", course_name="5A", book_title="Ciencias", topic="célula")
        assert context_key(r1) == context_key(r2)
        assert quiz_key(r1) != quiz_key(r2)


class TestTTLStore:
    def _store(self, clock, positive=10.0, negative=2.0, max_entries=3):
        return TTLStore("test", positive_ttl=positive, negative_ttl=negative, max_entries=max_entries, timer=clock)

    def test_set_and_get(self, clock):
        store = self._store(clock)
        store.set("k", {"v": 1})
        entry = store.get("k")
        assert entry is not None
        assert entry.value == {"v": 1}
        assert entry.negative is False

    def test_get_miss(self, clock):
        assert self._store(clock).get("missing") is None

    def test_overwrite(self, clock):
        store = self._store(clock)
        store.set("k", 1)
        store.set("k", 2)
        assert store.get("k").value == 2
        assert store.size() == 1

    def test_positive_entry_visible_until_ttl(self, clock):
        store = self._store(clock)
        store.set("k", "value")
        clock.advance(10.0 - 0.001)
        assert store.get("k") is not None
        clock.advance(0.002)
        assert store.get("k") is None

    def test_expired_entry_is_dropped(self, clock):
        store = self._store(clock)
        store.set("k", "value")
        clock.advance(11)
        assert store.get("k") is None
        assert store.size() == 0

    def test_get_does_not_extend_ttl(self, clock):
        store = self._store(clock)
        store.set("k", "value")
        clock.advance(6)
        assert store.get("k") is not None
        clock.advance(6)
        assert store.get("k") is None

    def test_negative_entry_uses_shorter_ttl(self, clock):
        store = self._store(clock)
        store.set_negative("k")
        entry = store.get("k")
        assert entry is not None
        assert entry.negative is True
        assert entry.value is None
        clock.advance(2.001)
        assert store.get("k") is None

    def test_negative_ttl_must_be_shorter(self):
        with pytest.raises(ValueError):
            TTLStore("bad", positive_ttl=5, negative_ttl=5, max_entries=1)
        with pytest.raises(ValueError):
            TTLStore("bad", positive_ttl=5, negative_ttl=10, max_entries=1)

    def test_max_entries_must_be_positive(self):
        with pytest.raises(ValueError):
            TTLStore("bad", positive_ttl=5, negative_ttl=1, max_entries=0)

    def test_eviction_bound_and_oldest_first(self, clock):
        store = self._store(clock, max_entries=3)
        for i in range(4):
            store.set(f"k{i}", i)
            clock.advance(0.1)
        assert store.size() == 3
        assert store.get("k0") is None
        assert [store.get(f"k{i}").value for i in (1, 2, 3)] == [1, 2, 3]

    def test_eviction_ignores_entry_class(self, clock):
        store = self._store(clock, max_entries=2)
        store.set("pos", 1)
        store.set_negative("neg")
        store.set("new", 2)
        assert store.get("pos") is None
        assert store.get("neg") is not None

    def test_eviction_is_fifo_not_lru(self, clock):
        store = self._store(clock, max_entries=2)
        store.set("a", 1)
        store.set("b", 2)
        store.get("a")
        store.set("c", 3)
        assert store.get("a") is None
        assert store.get("b") is not None

    def test_overwrite_refreshes_insertion_order(self, clock):
        store = self._store(clock, max_entries=2)
        store.set("a", 1)
        store.set("b", 2)
        store.set("a", 10)
        store.set("c", 3)
        assert store.get("b") is None
        assert store.get("a").value == 10

    def test_many_inserts_stay_bounded(self, clock):
        store = self._store(clock, max_entries=5)
        for i in range(50):
            store.set(f"k{i}", i)
            assert len(store) <= 5

    def test_clear(self, clock):
        store = self._store(clock)
        store.set("a", 1)
        store.clear()
        assert store.size() == 0


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_computation(self):
        flight = SingleFlight()
        calls = 0
        release = asyncio.Event()

        async def compute():
            nonlocal calls
            calls += 1
            await release.wait()
            return {"n": calls}

        tasks = [asyncio.create_task(flight.run_exclusive("k", compute)) for _ in range(5)]
        await asyncio.sleep(0)
        assert flight.in_flight("k")
        release.set()
        results = await asyncio.gather(*tasks)

        assert calls == 1
        assert all(r is results[0] for r in results)
        assert not flight.in_flight("k")
        assert len(flight) == 0

    @pytest.mark.asyncio
    async def test_waiters_observe_same_error(self):
        flight = SingleFlight()
        calls = 0
        release = asyncio.Event()

        async def compute():
            nonlocal calls
            calls += 1
            await release.wait()
            raise RuntimeError("backend down")

        tasks = [asyncio.create_task(flight.run_exclusive("k", compute)) for _ in range(3)]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert calls == 1
        assert all(isinstance(r, RuntimeError) for r in results)
        assert results[0] is results[1] is results[2]

    @pytest.mark.asyncio
    async def test_failure_does_not_block_later_attempts(self):
        flight = SingleFlight()

        async def failing():
            raise RuntimeError("boom")

        async def working():
            return "ok"

        with pytest.raises(RuntimeError):
            await flight.run_exclusive("k", failing)
        assert not flight.in_flight("k")
        assert await flight.run_exclusive("k", working) == "ok"

    @pytest.mark.asyncio
    async def test_sequential_calls_recompute(self):
        flight = SingleFlight()
        calls = 0

        async def compute():
            nonlocal calls
            calls += 1
            return calls

        assert await flight.run_exclusive("k", compute) == 1
        assert await flight.run_exclusive("k", compute) == 2

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block(self):
        flight = SingleFlight()
        slow_release = asyncio.Event()

        async def slow():
            await slow_release.wait()
            return "slow"

        async def fast():
            return "fast"

        slow_task = asyncio.create_task(flight.run_exclusive("a", slow))
        await asyncio.sleep(0)
        assert await asyncio.wait_for(flight.run_exclusive("b", fast), timeout=1) == "fast"
        slow_release.set()
        assert await slow_task == "slow"

    @pytest.mark.asyncio
    async def test_abandoned_caller_does_not_cancel_computation(self):
        flight = SingleFlight()
        release = asyncio.Event()
        finished = []

        async def compute():
            await release.wait()
            finished.append(True)
            return "done"

        first = asyncio.create_task(flight.run_exclusive("k", compute))
        await asyncio.sleep(0)
        second = asyncio.create_task(flight.run_exclusive("k", compute))
        await asyncio.sleep(0)
        first.cancel()
        await asyncio.sleep(0)
        release.set()

        assert await second == "done"
        assert finished == [True]
        assert first.cancelled()
