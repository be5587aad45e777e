"""A stack of states with deferred enter and leave notifications."""

from typing import Any


class State:
    """Base state; subclasses override enter, update and leave.

    The base implementation keeps track of whether the state is active and
    how much time it has spent being updated since it was entered.
    """

    def __init__(self):
        self.state_machine: "StateMachine | None" = None
        self.active = False
        self.time_in_state = 0.0

    def _machine(self) -> "StateMachine":
        if self.state_machine is None:
            raise RuntimeError("state is not attached to a state machine")
        return self.state_machine

    @property
    def context(self) -> Any:
        """The context object of the machine running this state."""
        return self._machine().context

    def drop(self) -> None:
        """Pop this state if it is the machine's current state."""
        machine = self._machine()
        if machine.current_state is self:
            machine.pop_state()

    def enter(self) -> None:
        """Mark the state active and restart its timer."""
        self.active = True
        self.time_in_state = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the time spent in this state."""
        self.time_in_state += delta_time

    def leave(self) -> None:
        """Mark the state inactive."""
        self.active = False


class IdleState(State):
    """A state that does nothing beyond the base bookkeeping."""


class StateMachine:
    """Stack of states; entering and leaving happen on the next update."""

    def __init__(self, context: Any = None):
        self.context = context
        self._states: list = []
        self._entering: State | None = None
        self._leaving: State | None = None

    @property
    def current_state(self) -> State | None:
        return self._states[-1] if self._states else None

    def __len__(self) -> int:
        return len(self._states)

    def set_state(self, state: State) -> None:
        """Replace the current state with another."""
        self.pop_state()
        self.push_state(state)

    def push_state(self, state: State) -> None:
        self._states.append(state)
        self._entering = state

    def pop_state(self) -> None:
        if not self._states:
            return
        self._leaving = self._states.pop()

    def update(self, delta_time: float) -> None:
        """Finish pending leave and enter transitions, then update the top state."""
        if self._leaving is not None:
            leaving, self._leaving = self._leaving, None
            leaving.leave()
            leaving.state_machine = None

        if self._entering is not None:
            entering, self._entering = self._entering, None
            entering.state_machine = self
            entering.enter()

        if self._states:
            self._states[-1].update(delta_time)