"""Tests for watch-mode change detection."""

from __future__ import annotations

import os

from sitegen.tree.watch import snapshot, watch

from .conftest import write_tree


def bump_mtime(path, seconds=10):
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + seconds * 1_000_000_000))


class TestSnapshot:
    def test_lists_files_and_directories(self, tmp_path):
        write_tree(tmp_path, {"a.html": "a", "css/site.css": "body"})
        state = snapshot(tmp_path)
        assert set(state) == {"a.html", "css", os.path.join("css", "site.css")}
        assert state["a.html"][1] == 1

    def test_missing_root_is_empty(self, tmp_path):
        assert snapshot(tmp_path / "absent") == {}

    def test_detects_modification(self, tmp_path):
        write_tree(tmp_path, {"a.html": "a"})
        before = snapshot(tmp_path)
        bump_mtime(tmp_path / "a.html")
        assert snapshot(tmp_path) != before


class TestWatch:
    def test_initial_build_only_when_stopped(self, tmp_path):
        builds = []
        count = watch(tmp_path, lambda: builds.append(1), stop=lambda: True)
        assert count == 1
        assert builds == [1]

    def test_rebuilds_after_change(self, tmp_path):
        write_tree(tmp_path, {"a.html": "a"})
        builds = []
        polls = []

        def fake_sleep(interval):
            polls.append(interval)
            if len(polls) == 2:
                write_tree(tmp_path, {"b.html": "b"})

        count = watch(
            tmp_path,
            lambda: builds.append(len(polls)),
            interval=0.25,
            stop=lambda: len(polls) >= 4,
            sleep=fake_sleep,
        )

        assert count == 2
        assert builds == [0, 2]
        assert polls == [0.25] * 4

    def test_keyboard_interrupt_ends_loop(self, tmp_path):
        def interrupt(_):
            raise KeyboardInterrupt

        assert watch(tmp_path, lambda: None, sleep=interrupt) == 1

    def test_keyboard_interrupt_during_initial_build(self, tmp_path):
        def rebuild():
            raise KeyboardInterrupt

        assert watch(tmp_path, rebuild, stop=lambda: True) == 0
