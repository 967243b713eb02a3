"""Bounded moment streams, transducer pipelines and deadline-driven processing."""

from __future__ import annotations

import os
import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

from vibeflow.ternary import Transducer

_CLOSED = object()
_POLL_INTERVAL = 0.01


class WorldMomentStream:
    """Bounded FIFO ring buffer of world moments.

    The capacity must be a power of two. One slot stays empty to tell a
    full buffer from an empty one, so at most ``capacity - 1`` moments fit.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError("capacity must be power of 2")
        self.capacity = capacity
        self._mask = capacity - 1
        self._buffer: List[Any] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def push(self, moment: Any) -> bool:
        """Add a moment without blocking; return False if the buffer is full."""
        with self._lock:
            next_head = (self._head + 1) & self._mask
            if next_head == self._tail:
                return False
            self._buffer[self._head] = moment
            self._head = next_head
            return True

    def pop(self) -> Optional[Any]:
        """Remove and return the oldest moment, or None if the buffer is empty."""
        with self._lock:
            if self._tail == self._head:
                return None
            moment = self._buffer[self._tail]
            self._buffer[self._tail] = None
            self._tail = (self._tail + 1) & self._mask
            return moment

    def __len__(self) -> int:
        with self._lock:
            return (self._head - self._tail) & self._mask


def _pass_through(acc: Any, value: Any):
    return value, False


class StreamTransformer:
    """A pipeline applying a chain of transducers to each item sent to it."""

    def __init__(self, capacity: int) -> None:
        self._source: "queue.Queue[Any]" = queue.Queue(maxsize=max(capacity, 0))
        self.transforms: List[Transducer] = []
        self._cancelled = threading.Event()

    def chain(self, transducer: Transducer) -> "StreamTransformer":
        """Append a transducer to the pipeline and return the pipeline."""
        self.transforms.append(transducer)
        return self

    def send(self, item: Any) -> None:
        """Queue an item for processing, blocking while the queue is full."""
        self._source.put(item)

    def close(self) -> None:
        """Signal that no more items will be sent."""
        self._source.put(_CLOSED)

    def cancel(self) -> None:
        """Stop processing as soon as possible."""
        self._cancelled.set()

    def _transform(self, item: Any) -> Any:
        current = item
        for transducer in self.transforms:
            current, _ = transducer(_pass_through)(None, current)
        return current

    def process(self, output: Callable[[Any], Any]) -> None:
        """Pass each transformed item to ``output`` until closed or cancelled."""
        while not self._cancelled.is_set():
            try:
                item = self._source.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            if item is _CLOSED:
                return
            result = self._transform(item)
            if self._cancelled.is_set():
                return
            output(result)


class RTStreamProcessor:
    """Processes moments one per tick, dropping any that miss the deadline.

    ``deadline`` is in seconds; ticks come at a tenth of the deadline.
    """

    def __init__(
        self,
        capacity: int,
        deadline: float,
        processor: Callable[[Any], Any],
    ) -> None:
        if deadline <= 0:
            raise ValueError("deadline must be positive")
        self.input_buffer = WorldMomentStream(capacity)
        self.output_buffer = WorldMomentStream(capacity)
        self.processor = processor
        self.deadline = deadline
        self.processed = 0
        self.dropped = 0
        self.max_latency = 0.0
        self._stats_lock = threading.Lock()

    def _step(self) -> None:
        start = time.perf_counter()
        moment = self.input_buffer.pop()
        if moment is None:
            return
        result = self.processor(moment)
        elapsed = time.perf_counter() - start
        with self._stats_lock:
            if elapsed > self.deadline or not self.output_buffer.push(result):
                self.dropped += 1
                return
            self.processed += 1
            self.max_latency = max(self.max_latency, elapsed)

    def process_real_time(self, stop_event: threading.Event) -> None:
        """Run the processing loop until ``stop_event`` is set."""
        interval = self.deadline / 10
        while not stop_event.wait(interval):
            self._step()


def cpu_optimized_batch(
    vibes: Sequence[Any],
    batch_size: int,
    processor: Callable[[List[Any]], Any],
) -> None:
    """Feed ``vibes`` to ``processor`` in batches, splitting large batches across threads."""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    workers = os.cpu_count() or 1
    items = list(vibes)
    for start in range(0, len(items), batch_size):
        batch = items[start:start + batch_size]
        if len(batch) <= workers:
            processor(batch)
            continue
        chunk_size = len(batch) // workers
        chunks = [
            batch[j * chunk_size:(j + 1) * chunk_size if j < workers - 1 else len(batch)]
            for j in range(workers)
        ]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(processor, chunk) for chunk in chunks]
            for future in futures:
                future.result()