import threading

from wordfinder.managers.cache import ResultCache


def test_get_missing_returns_none():
    cache = ResultCache()
    assert cache.get("tacct") is None
    assert cache.misses == 1
    assert cache.hits == 0


def test_put_then_get():
    cache = ResultCache()
    words = ["act", "cat"]
    stored = cache.put("tacct", words)
    words.append("tact")
    assert stored == ("act", "cat")
    assert cache.get("tacct") == ("act", "cat")
    assert "tacct" in cache
    assert len(cache) == 1
    assert cache.hits == 1


def test_last_write_wins():
    cache = ResultCache()
    cache.put("abc", ["cab"])
    cache.put("abc", ["abc", "cab"])
    assert cache.get("abc") == ("abc", "cab")
    assert len(cache) == 1


def test_concurrent_puts():
    cache = ResultCache()

    def fill(offset):
        for i in range(200):
            cache.put(f"key{offset + i}", [str(i)])

    threads = [threading.Thread(target=fill, args=(n * 200,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(cache) == 800
