"""Interactive selection state machine.

The controller owns the query, re-ranks the candidate set on every edit and
turns Enter/Delete into a Result for the caller to execute. The caller
reports back with notify(), which updates the candidate set and the status
line. Drawing and key decoding are left to the display layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .candidates import CandidateSet
from .search import RankedCandidate, ScorerConfig, ScratchBuffers, rank

CURRENT_LABEL = "<Current>"


class State(Enum):
    IDLE = "idle"
    TYPING = "typing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Key(Enum):
    """Non-character input signals."""

    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    DELETE = "delete"
    CANCEL = "cancel"


class Action(Enum):
    CREATE = "create"
    DELETE = "delete"


class Origin(Enum):
    EXISTING = "existing"  # picked from the list
    NEW = "new"  # typed query


@dataclass(frozen=True)
class Result:
    name: str
    action: Action
    origin: Origin


_PAST_TENSE = {Action.CREATE: "created", Action.DELETE: "deleted"}


def is_query_char(ch: str) -> bool:
    return len(ch) == 1 and (ch.isalnum() or ch in "_ ")


class SelectionController:
    """Drives one selection round at a time over a CandidateSet.

    Position 0 of the visible list is the <Current> entry standing for the
    typed query; positions 1.. are the ranked candidates.
    """

    def __init__(self, candidates: CandidateSet, config: ScorerConfig | None = None):
        self.candidates = candidates
        self.config = config or ScorerConfig()
        self.buffers = ScratchBuffers()
        self.query = ""
        self.entries: list[RankedCandidate] = []
        self.cursor = 0
        self.state = State.IDLE
        self.status = ""
        self.result: Result | None = None

    @property
    def selected(self) -> RankedCandidate | None:
        """Highlighted candidate, or None when <Current> is highlighted."""
        if self.cursor == 0:
            return None
        return self.entries[self.cursor - 1]

    @property
    def labels(self) -> list[str]:
        return [CURRENT_LABEL] + [entry.name for entry in self.entries]

    @property
    def finished(self) -> bool:
        return self.state in (State.CONFIRMED, State.CANCELLED)

    def begin(self) -> None:
        """Start a new round: empty query, full listing."""
        self.query = ""
        self.result = None
        self._reset()

    def _reset(self) -> None:
        self.state = State.IDLE
        self.entries = [RankedCandidate(name, handle) for name, handle in self.candidates]
        self.cursor = 0

    def _edit(self) -> None:
        self.state = State.TYPING
        self.entries = rank(self.query, self.candidates, self.config, self.buffers)
        self.cursor = 0

    def _move(self, position: int) -> None:
        self.cursor = max(0, min(position, len(self.entries)))

    def _confirm(self, action: Action) -> Result | None:
        entry = self.selected
        if entry is not None:
            result = Result(entry.name, action, Origin.EXISTING)
        elif self.query:
            result = Result(self.query, action, Origin.NEW)
        else:
            return None
        self.state = State.CONFIRMED
        self.result = result
        return result

    def handle(self, key: Key | str) -> Result | None:
        """Apply one input signal.

        Characters (letters, digits, underscore, space) are lower-cased and
        appended to the query; other characters are ignored.

        Returns:
            The Result when the signal confirms an action, else None.
        """
        if self.finished:
            raise RuntimeError("Selection round already finished; call begin() first")

        if key is Key.CANCEL:
            self.state = State.CANCELLED
        elif key is Key.CONFIRM:
            return self._confirm(Action.CREATE)
        elif key is Key.DELETE:
            return self._confirm(Action.DELETE)
        elif key is Key.UP:
            self._move(self.cursor - 1)
        elif key is Key.DOWN:
            self._move(self.cursor + 1)
        elif key is Key.HOME:
            self._move(0)
        elif key is Key.END:
            self._move(len(self.entries))
        elif key is Key.BACKSPACE:
            if self.query:
                self.query = self.query[:-1]
                if self.query:
                    self._edit()
                else:
                    self._reset()
        elif isinstance(key, str) and is_query_char(key):
            self.query += key.lower()
            self._edit()
        return None

    def notify(self, result: Result, success: bool) -> None:
        """Record the outcome of executing `result`.

        On success the name is added (CREATE) or removed (DELETE); on failure
        the candidate set is left alone. Either way the status line says what
        happened, and the controller is back at IDLE for the next round.
        """
        if success:
            if result.action is Action.CREATE:
                self.candidates.add(result.name)
            else:
                self.candidates.remove(result.name)
            self.status = f'Successfully {_PAST_TENSE[result.action]} directory "{result.name}"'
        else:
            self.status = f'Failed to {result.action.value} directory "{result.name}"'
        self.begin()

    def run_round(
        self,
        read_key: Callable[[], Key | str],
        render: Callable[["SelectionController"], None] | None = None,
    ) -> Result | None:
        """Run one round until confirm or cancel.

        Returns:
            The confirmed Result, or None if the round was cancelled.
        """
        self.begin()
        while True:
            if render is not None:
                render(self)
            result = self.handle(read_key())
            if self.state is State.CANCELLED:
                return None
            if result is not None:
                return result
