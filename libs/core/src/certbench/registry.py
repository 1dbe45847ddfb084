from __future__ import annotations
from typing import Dict, Any, Callable

class _Registry:
    def __init__(self) -> None:
        self._items: Dict[str, Any] = {}

    def register(self, name: str) -> Callable[[Any], Any]:
        def _inner(fn_or_obj: Any) -> Any:
            if name in self._items:
                raise ValueError(f"compressor {name!r} is already registered")
            self._items[name] = fn_or_obj
            return fn_or_obj
        return _inner

    def get(self, name: str) -> Any:
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"no compressor registered under {name!r}") from None

    def list(self) -> Dict[str, Any]:
        return dict(self._items)

registry = _Registry()
