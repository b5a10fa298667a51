import threading

import pytest

from lrucache.cache import LRUCache
from lrucache.errors import EmptyCacheError, KeyNotFoundError
from lrucache.synchronized import SynchronizedCache


def test_synchronized_cache_delegates_operations(clock):
    c = SynchronizedCache(LRUCache(3, clock=clock))

    c.add("a", 1)
    c.add("b", 2, 10)
    c.add("c", 3)
    assert c.get("a") == (1, True)
    assert c.keys() == ["a", "c", "b"]
    assert c.peek("b") == (2, True)
    assert c.contains("c") and "c" in c

    c.replace("c", 30)
    assert c.update_value("b", 20).value == 20
    assert c.update_expiration("c", 0).value == 30
    assert c.items() == [("c", 30), ("b", 20), ("a", 1)]

    clock.advance(11)
    assert c.clear_expired() == 1
    assert c.resize(1) == 1
    assert c.cap() == c.capacity == 1
    assert c.len() == len(c) == 1
    assert c.remove_oldest() == ("c", 30, True)

    with pytest.raises(EmptyCacheError):
        c.remove("c")
    with pytest.raises(KeyNotFoundError):
        c.replace("zzz", 0)

    c.add("z", 0)
    c.clear()
    assert c.len() == 0
    assert repr(c) == "SynchronizedCache(LRUCache(len=0, capacity=1))"


def test_synchronized_cache_under_concurrent_writers():
    inner = LRUCache(50)
    c = SynchronizedCache(inner)

    def worker(offset):
        for i in range(500):
            c.add((offset, i % 80), i)
            c.get((offset, (i * 7) % 80))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert c.len() == 50
    assert len(inner._order) == len(inner._index) == 50
