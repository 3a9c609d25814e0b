"""Multi-stream Lehmer random number generator (Park & Miller, 256 streams)."""

from __future__ import annotations

import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


class LehmerStreams:
    """A set of independent Lehmer generator streams, one of them current."""

    def __init__(self) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the stream that the next number comes from."""
        return self._stream

    def random(self) -> float:
        """Return the next number of the current stream, strictly between 0 and 1."""
        q, r = divmod(MODULUS, MULTIPLIER)
        seed = self._seeds[self._stream]
        t = MULTIPLIER * (seed % q) - r * (seed // q)
        self._seeds[self._stream] = t if t > 0 else t + MODULUS
        return self._seeds[self._stream] / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive the states of all other streams."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            previous = self._seeds[j - 1]
            value = A256 * (previous % q) - r * (previous // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive value is the state (reduced modulo the modulus), a negative
        value takes the state from the clock, and zero asks for it on stdin.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while x == 0:
            answer = input("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                candidate = int(answer.strip())
            except ValueError:
                candidate = 0
            if 0 < candidate < MODULUS:
                x = candidate
            else:
                print("\nInput out of range ... try again")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current one."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)


def self_test() -> bool:
    """Check the generator against its published reference values."""
    streams = LehmerStreams()
    streams.select_stream(0)
    streams.put_seed(1)
    for _ in range(10000):
        streams.random()
    ok = streams.get_seed() == CHECK
    streams.select_stream(1)
    streams.plant_seeds(1)
    return ok and streams.get_seed() == A256