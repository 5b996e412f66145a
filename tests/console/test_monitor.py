"""Tests for process performance sampling."""

import psutil

from chessconsole.console.monitor import ThreadInfo, sample_process


class TestSampleProcess:
    def test_current_process(self) -> None:
        info = sample_process()
        assert isinstance(info, ThreadInfo)
        assert info.total_threads >= 1
        assert info.memory_mb >= 0
        assert info.cpu_time >= 0.0

    def test_explicit_process(self) -> None:
        info = sample_process(psutil.Process())
        assert info.total_threads >= 1
