"""Balanced ternary states, logic gates and ternary-driven transducers."""

from __future__ import annotations

import copy
from enum import IntEnum
from typing import Any, Callable, Optional, Tuple, TypeVar

T = TypeVar("T")

Reducer = Callable[[Any, Any], Tuple[Any, bool]]
Transducer = Callable[[Reducer], Reducer]

_LOW_THRESHOLD = 0.33
_HIGH_THRESHOLD = 0.66


class TernaryState(IntEnum):
    """A balanced ternary value: -1, 0 or +1."""

    NEGATIVE = -1
    NEUTRAL = 0
    POSITIVE = 1

    def __neg__(self) -> "TernaryState":
        return TernaryState(-int(self))


_ALL_STATES = (TernaryState.NEGATIVE, TernaryState.NEUTRAL, TernaryState.POSITIVE)


def energy_to_ternary(energy: float) -> TernaryState:
    """Map an energy level onto a ternary state."""
    if energy < _LOW_THRESHOLD:
        return TernaryState.NEGATIVE
    if energy > _HIGH_THRESHOLD:
        return TernaryState.POSITIVE
    return TernaryState.NEUTRAL


_TARGET_ENERGY = {
    TernaryState.NEGATIVE: 0.2,
    TernaryState.NEUTRAL: 0.5,
    TernaryState.POSITIVE: 0.8,
}


def ternary_to_energy(state: TernaryState, current_energy: float) -> float:
    """Move the current energy 30% of the way towards the state's target energy."""
    target = _TARGET_ENERGY.get(TernaryState(state), 0.0)
    smoothing = 0.3
    return current_energy * (1 - smoothing) + target * smoothing


_CONSENSUS = {
    (TernaryState.NEGATIVE, TernaryState.NEGATIVE): TernaryState.NEGATIVE,
    (TernaryState.NEUTRAL, TernaryState.NEUTRAL): TernaryState.NEUTRAL,
    (TernaryState.POSITIVE, TernaryState.POSITIVE): TernaryState.POSITIVE,
}

_AMPLIFY = {
    (TernaryState.NEGATIVE, TernaryState.NEGATIVE): TernaryState.NEGATIVE,
    (TernaryState.POSITIVE, TernaryState.POSITIVE): TernaryState.POSITIVE,
    (TernaryState.NEGATIVE, TernaryState.POSITIVE): TernaryState.NEUTRAL,
    (TernaryState.POSITIVE, TernaryState.NEGATIVE): TernaryState.NEUTRAL,
    (TernaryState.NEUTRAL, TernaryState.NEGATIVE): TernaryState.NEGATIVE,
    (TernaryState.NEUTRAL, TernaryState.POSITIVE): TernaryState.POSITIVE,
    (TernaryState.NEGATIVE, TernaryState.NEUTRAL): TernaryState.NEGATIVE,
    (TernaryState.POSITIVE, TernaryState.NEUTRAL): TernaryState.POSITIVE,
    (TernaryState.NEUTRAL, TernaryState.NEUTRAL): TernaryState.NEUTRAL,
}

_INHIBIT = {
    (TernaryState.NEGATIVE, TernaryState.POSITIVE): TernaryState.NEGATIVE,
    (TernaryState.POSITIVE, TernaryState.NEGATIVE): TernaryState.NEUTRAL,
    (TernaryState.POSITIVE, TernaryState.POSITIVE): TernaryState.NEUTRAL,
    (TernaryState.NEGATIVE, TernaryState.NEGATIVE): TernaryState.NEGATIVE,
    (TernaryState.NEUTRAL, TernaryState.NEUTRAL): TernaryState.NEUTRAL,
    (TernaryState.NEUTRAL, TernaryState.POSITIVE): TernaryState.NEUTRAL,
    (TernaryState.NEUTRAL, TernaryState.NEGATIVE): TernaryState.NEGATIVE,
    (TernaryState.POSITIVE, TernaryState.NEUTRAL): TernaryState.NEUTRAL,
    (TernaryState.NEGATIVE, TernaryState.NEUTRAL): TernaryState.NEGATIVE,
}

_NAMED_TABLES = {
    "consensus": _CONSENSUS,
    "amplify": _AMPLIFY,
    "inhibit": _INHIBIT,
}


class TernaryLogicGate:
    """A two-input ternary operator defined by a truth table."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        overrides = _NAMED_TABLES.get(operator)
        if overrides is None:
            # Unknown operators pass the first input through.
            self.truth_table = {(a, b): a for a in _ALL_STATES for b in _ALL_STATES}
        else:
            self.truth_table = {
                (a, b): TernaryState.NEUTRAL for a in _ALL_STATES for b in _ALL_STATES
            }
            self.truth_table.update(overrides)

    def apply(self, a: TernaryState, b: TernaryState) -> TernaryState:
        """Evaluate the gate on two inputs; unknown pairs yield NEUTRAL."""
        return self.truth_table.get((a, b), TernaryState.NEUTRAL)


def ternary_transducer(
    logic: Callable[[T, TernaryState], Tuple[T, TernaryState]],
) -> Transducer:
    """Build a transducer threading a ternary state through ``logic``.

    Each reducer produced by the transducer keeps its own state, which
    starts at NEUTRAL.
    """

    def transducer(reducer: Reducer) -> Reducer:
        state = TernaryState.NEUTRAL

        def step(acc: Any, item: Any) -> Tuple[Any, bool]:
            nonlocal state
            result, state = logic(item, state)
            return reducer(acc, result)

        return step

    return transducer


def _energy_logic(vibe: Optional[Any], state: TernaryState) -> Tuple[Optional[Any], TernaryState]:
    if vibe is None:
        return vibe, state
    new_vibe = copy.copy(vibe)
    if state == TernaryState.NEGATIVE:
        new_vibe.energy = max(0.0, vibe.energy - 0.1)
    elif state == TernaryState.POSITIVE:
        new_vibe.energy = min(1.0, vibe.energy + 0.1)
    return new_vibe, energy_to_ternary(new_vibe.energy)


def vibe_energy_transducer() -> Transducer:
    """Transducer nudging each vibe's energy by the state left by the previous one."""
    return ternary_transducer(_energy_logic)