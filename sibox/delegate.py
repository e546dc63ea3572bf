"""Single and multicast callback holders."""

from __future__ import annotations

from typing import Any, Callable


class DelegateNotBoundError(RuntimeError):
    """Raised when executing a delegate that has nothing bound."""


class Delegate:
    """Holds at most one callable."""

    def __init__(self) -> None:
        self._func: Callable[..., Any] | None = None

    def bind(self, func: Callable[..., Any]) -> None:
        """Bind ``func``, replacing any previous binding."""
        self._func = func

    def unbind(self) -> None:
        self._func = None

    @property
    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound callable; raise if nothing is bound."""
        if self._func is None:
            raise DelegateNotBoundError("delegate has no bound callable")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> Any:
        """Call the bound callable if there is one, otherwise return ``None``."""
        if self._func is None:
            return None
        return self._func(*args)


def _remove_first(funcs: list[Callable[..., Any]], func: Callable[..., Any]) -> None:
    try:
        funcs.remove(func)
    except ValueError:
        pass


class MulticastDelegate:
    """Calls every bound callable in binding order."""

    def __init__(self) -> None:
        self._funcs: list[Callable[..., Any]] = []

    def bind(self, func: Callable[..., Any]) -> None:
        """Add ``func`` to the end of the call list."""
        self._funcs.append(func)

    def unbind(self, func: Callable[..., Any]) -> None:
        """Remove the first binding equal to ``func``; unknown callables are ignored."""
        _remove_first(self._funcs, func)

    def unbind_all(self) -> None:
        self._funcs.clear()

    def __len__(self) -> int:
        return len(self._funcs)

    def execute(self, *args: Any) -> None:
        for func in tuple(self._funcs):
            func(*args)


class CascadingMulticastDelegate:
    """Calls bound callables in order while each returns ``continue_if``."""

    def __init__(self, continue_if: bool = True) -> None:
        self._funcs: list[Callable[..., Any]] = []
        self.continue_if = continue_if

    def bind(self, func: Callable[..., Any]) -> None:
        """Add ``func`` to the end of the call list."""
        self._funcs.append(func)

    def unbind(self, func: Callable[..., Any]) -> None:
        """Remove the first binding equal to ``func``; unknown callables are ignored."""
        _remove_first(self._funcs, func)

    def unbind_all(self) -> None:
        self._funcs.clear()

    def __len__(self) -> int:
        return len(self._funcs)

    def execute(self, *args: Any) -> bool:
        """Return ``False`` as soon as a callable's result differs from ``continue_if``."""
        for func in tuple(self._funcs):
            if bool(func(*args)) != self.continue_if:
                return False
        return True