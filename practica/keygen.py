"""Generate keys on worker threads that meet at a barrier."""

from __future__ import annotations

import argparse
import logging
import random
import threading

log = logging.getLogger(__name__)

KEY_COUNT = 4
KEY_MODULUS = 13


def generate_keys(count=KEY_COUNT, rng=None):
    """Have ``count`` threads draw one key each, returning them once all have arrived."""
    if count < 0:
        raise ValueError("count must not be negative")
    if rng is None:
        rng = random.Random()
    keys = [0] * count
    barrier = threading.Barrier(count + 1)
    lock = threading.Lock()

    def worker(index):
        with lock:
            keys[index] = rng.randrange(KEY_MODULUS)
        log.debug("Thread No is %d Wait", index)
        barrier.wait()
        log.debug("Thread No is %d Over", index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    barrier.wait()
    result = list(keys)
    for thread in threads:
        thread.join()
    return result


def main(argv=None):
    """Print freshly generated keys, then each scaled by its position."""
    parser = argparse.ArgumentParser(description="Generate keys on several threads.")
    parser.add_argument("--count", type=int, default=KEY_COUNT)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    keys = generate_keys(args.count, random.Random(args.seed))
    for index, key in enumerate(keys):
        print(f"key[{index}]: {key}")
    for index, key in enumerate(keys):
        print(f"key[{index}]: {key * (index + 1)}")
    return 0