"""The in-memory set of known directory names."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class DisplayHandle:
    """Default display handle: a label the display layer can render."""

    label: str
    released: bool = False


def _default_release(handle: Any) -> None:
    if isinstance(handle, DisplayHandle):
        handle.released = True


class CandidateSet:
    """Deduplicated registry of names, each bound to one display handle.

    Handles are created by `handle_factory` when a name is first added and
    passed to `release` exactly once, when the name is removed or the set is
    closed. Iteration yields (name, handle) pairs in insertion order.
    """

    def __init__(
        self,
        names: Iterable[str] = (),
        handle_factory: Callable[[str], Any] = DisplayHandle,
        release: Callable[[Any], None] = _default_release,
    ):
        self._handle_factory = handle_factory
        self._release = release
        self._entries: dict[str, Any] = {}
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        """Insert `name` if absent. Adding a known name is a no-op."""
        if not name:
            raise ValueError("Candidate names must not be empty")
        if name in self._entries:
            return
        self._entries[name] = self._handle_factory(name)

    def remove(self, name: str) -> None:
        """Drop `name` and release its handle. Unknown names are ignored."""
        if name not in self._entries:
            return
        self._release(self._entries.pop(name))

    def handle(self, name: str) -> Any:
        return self._entries[name]

    def names(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        yield from self._entries.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def size(self) -> int:
        return len(self._entries)

    def close(self) -> None:
        """Release every remaining handle and empty the set."""
        while self._entries:
            _, handle = self._entries.popitem()
            self._release(handle)

    def __enter__(self) -> "CandidateSet":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
