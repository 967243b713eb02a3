from dataclasses import dataclass
from typing import Optional

import pytest

from vibeflow.optimized import (
    HardwareOptimizedVibe,
    QuantumInspiredProcessor,
    convert_to_optimized,
)
from vibeflow.ternary import TernaryState


@dataclass
class SensorData:
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    light: Optional[float] = None


@dataclass
class Vibe:
    id: str
    energy: float
    name: str = ""
    sensor_data: Optional[SensorData] = None


def _sample_vibe():
    return Vibe(
        id="test-vibe-12345",
        name="Test Vibe",
        energy=0.75,
        sensor_data=SensorData(temperature=23.5, humidity=65.0, light=800.0),
    )


def test_convert_to_optimized_preserves_values():
    optimized = convert_to_optimized(_sample_vibe())
    assert optimized.validate()
    assert optimized.energy == 0.75
    assert optimized.temperature == 23.5
    assert optimized.humidity == 65.0
    assert optimized.light == 800.0
    assert optimized.id[:15] == b"test-vibe-12345"
    assert optimized.id[15:] == b"\0"


def test_convert_truncates_long_id():
    optimized = convert_to_optimized(Vibe(id="abcdefghijklmnopqrstuvwxyz", energy=0.5))
    assert optimized.id == b"abcdefghijklmnop"
    assert optimized.validate()


def test_convert_without_sensor_data_uses_zero():
    optimized = convert_to_optimized(Vibe(id="x", energy=0.5))
    assert (optimized.temperature, optimized.humidity, optimized.light) == (0.0, 0.0, 0.0)


def test_convert_partial_sensor_data():
    optimized = convert_to_optimized(
        Vibe(id="x", energy=0.5, sensor_data=SensorData(humidity=40.0))
    )
    assert optimized.temperature == 0.0
    assert optimized.humidity == 40.0


def test_energy_is_rounded_to_single_precision():
    optimized = convert_to_optimized(Vibe(id="x", energy=0.1))
    assert optimized.energy != 0.1
    assert optimized.energy == pytest.approx(0.1, abs=1e-7)


def test_validate_detects_tampering():
    optimized = convert_to_optimized(_sample_vibe())
    original = optimized.checksum
    optimized.energy = 0.5
    assert not optimized.validate()
    assert optimized.checksum == original


def test_checksum_of_empty_record_is_zero():
    record = HardwareOptimizedVibe()
    assert record.validate()
    assert record.checksum == 0


def test_evolve_dimension_mismatch_returns_input():
    processor = QuantumInspiredProcessor(3)
    vibes = [Vibe("a", 0.5)]
    assert processor.evolve(vibes) is vibes


def test_evolve_shifts_energies_by_state():
    processor = QuantumInspiredProcessor(4)
    vibes = [Vibe("low", 0.2), Vibe("mid", 0.5), Vibe("high", 0.8), None]
    result = processor.evolve(vibes)
    assert [v.energy for v in result[:3]] == pytest.approx([0.0, 0.5, 1.0])
    assert result[3] is None
    assert vibes[0].energy == 0.2
    assert processor.superposition == [
        TernaryState.NEGATIVE,
        TernaryState.NEUTRAL,
        TernaryState.POSITIVE,
        TernaryState.NEUTRAL,
    ]


def test_evolve_entanglement_mirrors_state():
    processor = QuantumInspiredProcessor(2)
    processor.entangle(0, 1)
    assert processor.entanglement == {0: 1, 1: 0}
    result = processor.evolve([Vibe("a", 0.8), Vibe("b", 0.5)])
    assert result[0].energy == pytest.approx(1.0)
    assert result[1].energy == pytest.approx(0.3)


def test_evolve_ignores_out_of_range_entanglement():
    processor = QuantumInspiredProcessor(2)
    processor.entangle(0, 5)
    result = processor.evolve([Vibe("a", 0.8), Vibe("b", 0.5)])
    assert [v.energy for v in result] == pytest.approx([1.0, 0.5])


def test_default_coherence():
    processor = QuantumInspiredProcessor(1)
    assert processor.coherence == 1_000_000
    assert processor.superposition == [TernaryState.NEUTRAL]