from typebind import _unsafe_cache


def test_unsafe_cache():
    x = 0

    @_unsafe_cache.unsafe_cache(maxsize=2)
    def f(dummy: int):
        nonlocal x
        x += 1

    f(0)
    f(0)
    f(0)
    assert x == 1
    f(1)
    f(1)
    f(1)
    assert x == 2
    f(0)
    f(0)
    f(0)
    assert x == 2
    f(2)
    f(2)
    f(2)
    assert x == 3

    # Entry for 0 was evicted when 2 was added.
    f(0)
    assert x == 4


def test_unsafe_cache_unhashable():
    calls = []

    @_unsafe_cache.unsafe_cache(maxsize=4)
    def f(values):
        calls.append(values)
        return len(values)

    values = [1, 2, 3]
    assert f(values) == 3
    assert f(values) == 3
    assert len(calls) == 1

    # Same contents, different object.
    assert f([1, 2, 3]) == 3
    assert len(calls) == 2


def test_clear_cache():
    x = 0

    @_unsafe_cache.unsafe_cache(maxsize=2)
    def f(dummy: int):
        nonlocal x
        x += 1

    f(0)
    f(0)
    assert x == 1
    _unsafe_cache.clear_cache()
    f(0)
    assert x == 2
