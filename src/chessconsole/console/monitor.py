"""Process performance sampling for the info panel."""

from __future__ import annotations

from dataclasses import dataclass

import psutil

_MIB = 1024 * 1024


@dataclass(frozen=True, slots=True)
class ThreadInfo:
    """One sample of the current process."""

    total_threads: int
    memory_mb: int
    cpu_time: float  # user + system seconds


def sample_process(process: psutil.Process | None = None) -> ThreadInfo:
    """Sample thread count, resident memory and CPU time of *process*.

    Defaults to the current process.
    """
    proc = process if process is not None else psutil.Process()
    with proc.oneshot():
        times = proc.cpu_times()
        return ThreadInfo(
            total_threads=proc.num_threads(),
            memory_mb=proc.memory_info().rss // _MIB,
            cpu_time=times.user + times.system,
        )
