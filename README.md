# vibeflow

Small building blocks for processing "vibes" (energy levels between 0 and 1)
and world moments with balanced ternary logic.

A vibe is any object with an `energy` attribute. `convert_to_optimized` also
reads `id` and, if present, a `sensor_data` object with `temperature`,
`humidity` and `light` readings (each may be `None`). Functions that change a
vibe's energy work on shallow copies and leave the input untouched.

## Modules

### `vibeflow.ternary`

- `TernaryState`: `NEGATIVE` (-1), `NEUTRAL` (0), `POSITIVE` (1); negating a
  state flips its sign.
- `energy_to_ternary(energy)`: below 0.33 is `NEGATIVE`, above 0.66 is
  `POSITIVE`, anything else is `NEUTRAL`.
- `ternary_to_energy(state, current_energy)`: moves the energy 30% of the way
  towards 0.2, 0.5 or 0.8 for negative, neutral and positive.
- `TernaryLogicGate(operator)` with `apply(a, b)`: truth tables for
  `"consensus"`, `"amplify"` and `"inhibit"`; any other name returns the first
  input.
- `ternary_transducer(logic)` builds a transducer that threads a ternary state
  (starting at `NEUTRAL`) through `logic(item, state)`.
  `vibe_energy_transducer()` uses it to nudge each vibe's energy by ±0.1
  according to the state left by the previous vibe.

### `vibeflow.context`

- `ComonadicVibeContext`: a dataclass with `center`, `neighbors`, `temporal`,
  `gradient` and `coherence`, and the methods `extract`, `duplicate` (coherence
  decays by a factor of 0.9) and `extend`.
- `VibeContextualTransformer(max_history)`: keeps the last `max_history`
  vibes. `transform_with_context(center, neighbors)` chooses the consensus gate
  when coherence is above 0.8, the amplify gate when the gradient is not
  neutral, and the inhibit gate otherwise. `calculate_gradient`,
  `calculate_coherence` and `update_history` are public as well.

### `vibeflow.streams`

- `WorldMomentStream(capacity)`: a thread-safe ring buffer. The capacity must
  be a power of two (otherwise `ValueError`), and it holds at most
  `capacity - 1` items. `push` returns `False` when the buffer is full; `pop`
  returns `None` when it is empty; `len()` gives the number of items held.
- `StreamTransformer(capacity)`: `chain` transducers, `send` items, `close`
  when done, and run `process(output)`, which calls `output` with every
  transformed item until the transformer is closed or `cancel` is called.
- `RTStreamProcessor(capacity, deadline, processor)`: `process_real_time(stop_event)`
  takes one moment from `input_buffer` every `deadline / 10` seconds, runs
  `processor` on it and pushes the result to `output_buffer`. Results that miss
  the deadline, or that do not fit, are counted in `dropped`; the others in
  `processed`, with the slowest time kept in `max_latency`.
- `cpu_optimized_batch(vibes, batch_size, processor)`: calls `processor` on
  batches of `batch_size` items; a batch larger than the CPU count is split
  into chunks that run on a thread pool.

### `vibeflow.optimized`

- `convert_to_optimized(vibe)` returns a `HardwareOptimizedVibe`: a 16-byte id,
  single-precision readings and an XOR checksum; `validate()` checks the
  checksum against the current fields.
- `QuantumInspiredProcessor(qubits)`: `entangle(q1, q2)` pairs two positions;
  `evolve(vibes)` maps energies to ternary states, mirrors entangled pairs with
  the opposite state, and shifts each energy by ±0.2 within [0, 1]. A list of
  the wrong length is returned unchanged.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from vibeflow.ternary import TernaryLogicGate, TernaryState, energy_to_ternary

gate = TernaryLogicGate("amplify")
state = gate.apply(energy_to_ternary(0.5), TernaryState.POSITIVE)
assert state is TernaryState.POSITIVE
```

```python
from vibeflow.streams import WorldMomentStream

stream = WorldMomentStream(8)
stream.push("moment-1")
assert stream.pop() == "moment-1"
assert stream.pop() is None
```

## What it does not do

vibeflow is a library of in-process building blocks only. It does not connect
to a message broker or publish world moments anywhere, keeps no storage of
worlds or vibes, and has no command-line tool or server.