"""Write to randomly chosen pipes and wait until some become readable."""

from __future__ import annotations

import argparse
import contextlib
import os
import random
import selectors
from dataclasses import dataclass


@dataclass(frozen=True)
class PollReport:
    """The writes made and the pipes found readable afterwards."""

    writes: tuple[tuple[int, int, int], ...]
    ready: tuple[tuple[int, int], ...]


def poll_pipes(num_pipes=10, num_writes=3, rng=None):
    """Open pipes, write a byte to random ones and report which are readable.

    ``writes`` holds (pipe index, write fd, read fd); ``ready`` holds
    (pipe index, read fd) in pipe order. The pipes are closed on return.
    """
    if num_pipes < 1:
        raise ValueError("num_pipes must be at least 1")
    if num_writes < 1:
        raise ValueError("num_writes must be at least 1")
    if rng is None:
        rng = random.Random()
    with contextlib.ExitStack() as stack:
        pipes = []
        for _ in range(num_pipes):
            read_fd, write_fd = os.pipe()
            stack.callback(os.close, read_fd)
            stack.callback(os.close, write_fd)
            pipes.append((read_fd, write_fd))

        writes = []
        for _ in range(num_writes):
            index = rng.randrange(num_pipes)
            read_fd, write_fd = pipes[index]
            os.write(write_fd, b"a")
            writes.append((index, write_fd, read_fd))

        with selectors.DefaultSelector() as selector:
            for index, (read_fd, _) in enumerate(pipes):
                selector.register(read_fd, selectors.EVENT_READ, index)
            events = selector.select()
        ready = sorted((key.data, key.fd) for key, _ in events)
    return PollReport(tuple(writes), tuple(ready))


def main(argv=None):
    """Run one round of writes and report the readable pipes."""
    parser = argparse.ArgumentParser(description="Poll a set of pipes.")
    parser.add_argument("--pipes", type=int, default=10)
    parser.add_argument("--writes", type=int, default=3)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    report = poll_pipes(args.pipes, args.writes, random.Random(args.seed))
    for _, write_fd, read_fd in report.writes:
        print(f"Writing to fd: {write_fd:3d}(read fd: {read_fd:3d})")
    print(f"poll() returned: {len(report.ready)}")
    for index, read_fd in report.ready:
        print(f"Readable: {index} {read_fd:3d}")
    return 0