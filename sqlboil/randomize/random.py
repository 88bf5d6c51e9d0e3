"""Random values for filling in test data."""

from __future__ import annotations

import hashlib
import random
import threading
import time

ALPHABET_ALL = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_LOWER_ALPHA = "abcdefghijklmnopqrstuvwxyz"

_MAX_INT32 = 2**31 - 1
_INT64_MASK = 2**64 - 1


class Seed:
    """A thread-safe counter used for pseudo-random values.

    Full randomisation causes collisions where uniqueness matters, so values
    derived from a seed simply count upwards.
    """

    def __init__(self, value: int | None = None) -> None:
        self._value = int(time.time()) if value is None else value
        self._lock = threading.Lock()

    def next_int(self) -> int:
        with self._lock:
            self._value += 1
            return self._value % _MAX_INT32

    def __repr__(self) -> str:
        return f"Seed({self._value})"


def rand_str(seed: Seed, length: int) -> str:
    return "".join(
        ALPHABET_ALL[seed.next_int() % len(ALPHABET_ALL)] for _ in range(length)
    )


def rand_byte_slice(seed: Seed, length: int) -> bytes:
    return bytes(seed.next_int() % 256 for _ in range(length))


def rand_point() -> str:
    a = random.randrange(100)
    return f"({a},{a + 1})"


def rand_box() -> str:
    a = random.randrange(100)
    return f"({a},{a + 1}),({a + 2},{a + 3})"


def rand_circle() -> str:
    a, b, c = (random.randrange(100) for _ in range(3))
    return f"(({a},{b}),{c})"


def rand_net_addr() -> str:
    return ".".join(str(random.randrange(254) + 1) for _ in range(4))


def rand_mac_addr() -> str:
    octets = bytearray(random.randbytes(6))
    octets[0] |= 2  # locally administered
    return ":".join(f"{b:02x}" for b in octets)


def rand_lsn() -> str:
    return f"{random.randrange(9000000)}/{random.randrange(9000000)}"


def rand_tx_id() -> str:
    # The order of the integers matters: xmin:xmax:xip_list
    a = random.randrange(200) + 100
    return f"{a}:{a + 100}:{a},{a + 50}"


def rand_money(seed: Seed) -> str:
    return f"{seed.next_int()}.00"


def _stable_source(name: str) -> random.Random:
    digest = hashlib.md5(name.encode("utf-8")).digest()
    value = 0
    for i, byte in enumerate(digest):
        value ^= (byte << ((i * 4) % 64)) & _INT64_MASK
    return random.Random(value)


def stable_db_name(name: str) -> str:
    """Derive a stable 40-letter lower-case database name from name."""
    rng = _stable_source(name)
    return "".join(rng.choice(ALPHABET_LOWER_ALPHA) for _ in range(40))