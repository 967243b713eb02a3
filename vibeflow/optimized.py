"""Compact vibe records with checksums and a ternary state evolver."""

from __future__ import annotations

import copy
import struct
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from vibeflow.ternary import TernaryState, energy_to_ternary

_ID_SIZE = 16


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


@dataclass
class HardwareOptimizedVibe:
    """A fixed-size vibe record with single-precision readings and a checksum."""

    id: bytes = bytes(_ID_SIZE)
    energy: float = 0.0
    temperature: float = 0.0
    humidity: float = 0.0
    light: float = 0.0
    checksum: int = 0

    def _compute_checksum(self) -> int:
        total = 0
        for byte in self.id:
            total ^= byte
        for reading in (self.energy, self.temperature, self.humidity, self.light):
            total ^= _float32_bits(reading)
        return total

    def validate(self) -> bool:
        """Return True if the stored checksum matches the current contents."""
        return self._compute_checksum() == self.checksum


def _reading(sensor: Any, name: str) -> float:
    value = getattr(sensor, name, None) if sensor is not None else None
    return _float32(value) if value is not None else 0.0


def convert_to_optimized(vibe: Any) -> HardwareOptimizedVibe:
    """Pack a vibe into a HardwareOptimizedVibe with a fresh checksum."""
    raw_id = str(vibe.id).encode("utf-8")[:_ID_SIZE]
    sensor = getattr(vibe, "sensor_data", None)
    optimized = HardwareOptimizedVibe(
        id=raw_id.ljust(_ID_SIZE, b"\0"),
        energy=_float32(vibe.energy),
        temperature=_reading(sensor, "temperature"),
        humidity=_reading(sensor, "humidity"),
        light=_reading(sensor, "light"),
    )
    optimized.checksum = optimized._compute_checksum()
    return optimized


@dataclass
class QuantumInspiredProcessor:
    """Evolves vibe energies through entangled ternary states."""

    qubits: int
    superposition: List[TernaryState] = field(init=False)
    entanglement: Dict[int, int] = field(default_factory=dict, init=False)
    coherence: int = field(default=1_000_000, init=False)

    def __post_init__(self) -> None:
        self.superposition = [TernaryState.NEUTRAL] * self.qubits

    def entangle(self, qubit1: int, qubit2: int) -> None:
        """Correlate two qubits in both directions."""
        self.entanglement[qubit1] = qubit2
        self.entanglement[qubit2] = qubit1

    def evolve(self, vibes: Sequence[Optional[Any]]) -> Sequence[Optional[Any]]:
        """Return new vibes with energies shifted by their evolved states.

        If the number of vibes differs from the number of qubits the input
        is returned unchanged.
        """
        if len(vibes) != len(self.superposition):
            return vibes

        self.superposition = [
            TernaryState.NEUTRAL if vibe is None else energy_to_ternary(vibe.energy)
            for vibe in vibes
        ]

        size = len(self.superposition)
        for qubit1, qubit2 in self.entanglement.items():
            if 0 <= qubit1 < size and 0 <= qubit2 < size:
                if self.superposition[qubit1] != TernaryState.NEUTRAL:
                    self.superposition[qubit2] = -self.superposition[qubit1]

        result: List[Optional[Any]] = []
        for vibe, state in zip(vibes, self.superposition):
            if vibe is None:
                result.append(None)
                continue
            evolved = copy.copy(vibe)
            if state == TernaryState.NEGATIVE:
                evolved.energy = max(0.0, vibe.energy - 0.2)
            elif state == TernaryState.POSITIVE:
                evolved.energy = min(1.0, vibe.energy + 0.2)
            result.append(evolved)
        return result