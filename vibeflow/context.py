"""Context-aware vibe transformation built on a comonadic context."""

from __future__ import annotations

import copy
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from vibeflow.ternary import (
    TernaryLogicGate,
    TernaryState,
    energy_to_ternary,
    ternary_to_energy,
)


@dataclass
class ComonadicVibeContext:
    """A vibe focused within its neighbours and temporal history."""

    center: Any
    neighbors: List[Any] = field(default_factory=list)
    temporal: List[Any] = field(default_factory=list)
    gradient: TernaryState = TernaryState.NEUTRAL
    coherence: float = 0.0

    def extract(self) -> Any:
        """Return the focused vibe."""
        return self.center

    def duplicate(self) -> "ComonadicVibeContext":
        """Return a context of contexts with slightly decayed coherence."""
        return ComonadicVibeContext(
            center=self.center,
            neighbors=list(self.neighbors),
            temporal=self.temporal,
            gradient=self.gradient,
            coherence=self.coherence * 0.9,
        )

    def extend(self, f: Callable[["ComonadicVibeContext"], Any]) -> "ComonadicVibeContext":
        """Apply a context-aware function to the centre and to each neighbour."""
        new_center = f(self)
        new_neighbors = [
            f(
                ComonadicVibeContext(
                    center=neighbor,
                    neighbors=[self.center],
                    temporal=self.temporal,
                    gradient=-TernaryState(self.gradient),
                    coherence=self.coherence,
                )
            )
            for neighbor in self.neighbors
        ]
        return ComonadicVibeContext(
            center=new_center,
            neighbors=new_neighbors,
            temporal=self.temporal,
            gradient=self.gradient,
            coherence=self.coherence,
        )


class VibeContextualTransformer:
    """Transforms vibes using their neighbours and a bounded history."""

    def __init__(self, max_history: int) -> None:
        self.max_history = max_history
        self.logic_gates = {
            name: TernaryLogicGate(name) for name in ("consensus", "amplify", "inhibit")
        }
        self.history: deque = deque(maxlen=max(max_history, 0))

    def transform_with_context(self, center: Any, neighbors: Sequence[Optional[Any]]) -> Any:
        """Transform ``center`` in the light of its neighbours, then record it."""
        ctx = ComonadicVibeContext(
            center=center,
            neighbors=list(neighbors),
            temporal=list(self.history),
            gradient=self.calculate_gradient(center),
            coherence=self.calculate_coherence(center, neighbors),
        )
        transformed = ctx.extend(self._context_aware_transform)
        self.update_history(center)
        return transformed.extract()

    def calculate_gradient(self, vibe: Any) -> TernaryState:
        """Direction of change relative to the latest recorded vibe."""
        if len(self.history) < 2:
            return TernaryState.NEUTRAL
        recent = self.history[-1].energy
        if vibe.energy > recent + 0.1:
            return TernaryState.POSITIVE
        if vibe.energy < recent - 0.1:
            return TernaryState.NEGATIVE
        return TernaryState.NEUTRAL

    def calculate_coherence(self, center: Any, neighbors: Sequence[Optional[Any]]) -> float:
        """exp(-|center energy - mean neighbour energy|); 1.0 with no neighbours."""
        if not neighbors:
            return 1.0
        total = sum(n.energy for n in neighbors if n is not None)
        average = total / len(neighbors)
        return math.exp(-abs(center.energy - average))

    def update_history(self, vibe: Any) -> None:
        """Record a vibe, dropping the oldest beyond ``max_history``."""
        self.history.append(vibe)

    def _apply_gate_with_first_neighbor(self, vibe: Any, neighbors: Sequence[Any], gate: str) -> None:
        first = next((n for n in neighbors if n is not None), None)
        if first is None:
            return
        result = self.logic_gates[gate].apply(
            energy_to_ternary(vibe.energy), energy_to_ternary(first.energy)
        )
        vibe.energy = ternary_to_energy(result, vibe.energy)

    def _context_aware_transform(self, ctx: ComonadicVibeContext) -> Any:
        vibe = copy.copy(ctx.center)
        if ctx.coherence > 0.8:
            self._apply_gate_with_first_neighbor(vibe, ctx.neighbors, "consensus")
        elif ctx.gradient != TernaryState.NEUTRAL:
            result = self.logic_gates["amplify"].apply(
                energy_to_ternary(vibe.energy), ctx.gradient
            )
            vibe.energy = ternary_to_energy(result, vibe.energy)
        else:
            self._apply_gate_with_first_neighbor(vibe, ctx.neighbors, "inhibit")
        return vibe