import functools
from typing import Any, Callable, Dict, List, TypeVar

CallableType = TypeVar("CallableType", bound=Callable)


_cache_list: List[Dict[Any, Any]] = []


def clear_cache() -> None:
    """Drop everything memoized by :func:`unsafe_cache`. Useful when classes are
    redefined, for example in tests or notebooks."""
    for c in _cache_list:
        c.clear()


def unsafe_cache(maxsize: int) -> Callable[[CallableType], CallableType]:
    """Memoize a function of classes. Unhashable arguments fall back to their object
    IDs, which assumes they are never mutated and never go out of scope.

    Only results are cached; exceptions propagate and are recomputed on the next
    call."""

    local_cache: Dict[Any, Any] = {}
    _cache_list.append(local_cache)

    def inner(f: CallableType) -> CallableType:
        @functools.wraps(f)
        def wrapped_f(*args, **kwargs):
            key = tuple(unsafe_hash(arg) for arg in args) + tuple(
                ("__kwarg__", k, unsafe_hash(v)) for k, v in kwargs.items()
            )

            if key in local_cache:
                return local_cache[key]

            out = f(*args, **kwargs)
            local_cache[key] = out

            # Evict the oldest entry; dicts keep insertion order.
            if len(local_cache) > maxsize:
                local_cache.pop(next(iter(local_cache)))
            return out

        return wrapped_f  # type: ignore

    return inner


def unsafe_hash(obj: Any) -> Any:
    try:
        hash(obj)
        return obj
    except TypeError:
        return ("__id__", id(obj))
