"""
Tests for the clipboard bridge.

These use small shell commands in place of xclip.
"""

import subprocess

from oneliners.clipboard import CommandClipboard
from oneliners.config import ClipboardSettings

MISSING = "oneliners-test-no-such-program"


class TestAvailability:
    """Tests for is_available."""

    def test_present_program(self):
        """A program on PATH is available."""
        assert CommandClipboard(["sh", "-c", "cat"]).is_available()

    def test_missing_program(self):
        """A program not on PATH is unavailable."""
        assert not CommandClipboard([MISSING]).is_available()

    def test_only_first_word_checked(self):
        """Arguments after the program name don't affect the check."""
        assert CommandClipboard(["sh", MISSING]).is_available()


class TestFromSettings:
    """Tests for building the bridge from config."""

    def test_defaults(self):
        """Default settings target xclip's clipboard selection, lenient."""
        clip = CommandClipboard.from_settings(ClipboardSettings())
        assert clip.command == ["xclip", "-selection", "clipboard"]
        assert clip.program == "xclip"
        assert clip.strict is False

    def test_custom(self):
        """Custom command and strict mode are carried over."""
        settings = ClipboardSettings(command=["wl-copy"], strict=True, timeout=1.5)
        clip = CommandClipboard.from_settings(settings)
        assert clip.command == ["wl-copy"]
        assert clip.strict is True
        assert clip.timeout == 1.5


class TestLenientCopy:
    """Default mode: fire-and-forget."""

    def test_spawn_failure_reported_false(self):
        """A missing program gives False rather than raising."""
        assert CommandClipboard([MISSING]).copy("text") is False

    def test_nonzero_exit_not_checked(self):
        """The child's exit status is not looked at."""
        assert CommandClipboard(["sh", "-c", "cat >/dev/null; exit 3"]).copy("text") is True

    def test_does_not_wait(self, monkeypatch):
        """The child process is never waited on."""
        calls = {}

        class FakeProc:
            def __init__(self, command, **kwargs):
                calls["command"] = command
                calls["kwargs"] = kwargs
                self.stdin = FakeStdin()

            def wait(self, timeout=None):
                raise AssertionError("lenient copy must not wait")

        class FakeStdin:
            def __init__(self):
                self.data = b""

            def write(self, data):
                calls["data"] = data

            def close(self):
                calls["closed"] = True

        monkeypatch.setattr(subprocess, "Popen", FakeProc)

        assert CommandClipboard(["xclip", "-selection", "clipboard"]).copy("ls ✓") is True
        assert calls["command"] == ["xclip", "-selection", "clipboard"]
        assert calls["kwargs"]["stdin"] is subprocess.PIPE
        assert calls["data"] == "ls ✓".encode("utf-8")
        assert calls["closed"] is True

    def test_write_failure_reported_false(self, monkeypatch):
        """A broken pipe while writing gives False rather than raising."""

        class BrokenStdin:
            def write(self, data):
                raise BrokenPipeError("gone")

            def close(self):
                pass

        class FakeProc:
            def __init__(self, command, **kwargs):
                self.stdin = BrokenStdin()

        monkeypatch.setattr(subprocess, "Popen", FakeProc)
        assert CommandClipboard(["xclip"]).copy("text") is False


class TestStrictCopy:
    """Strict mode: the child must succeed."""

    def test_success_writes_bytes(self, tmp_path):
        """The snippet reaches the child's stdin unchanged."""
        out = tmp_path / "clip.txt"
        clip = CommandClipboard(["sh", "-c", f"cat > '{out}'"], strict=True)
        assert clip.copy("grep -rn 'TODO' .") is True
        assert out.read_text(encoding="utf-8") == "grep -rn 'TODO' ."

    def test_nonzero_exit(self):
        """A failing child gives False."""
        clip = CommandClipboard(["sh", "-c", "cat >/dev/null; exit 1"], strict=True)
        assert clip.copy("text") is False

    def test_spawn_failure(self):
        """A missing program gives False."""
        assert CommandClipboard([MISSING], strict=True).copy("text") is False

    def test_timeout(self):
        """A child that hangs past the timeout gives False."""
        clip = CommandClipboard(["sh", "-c", "cat >/dev/null; sleep 5"], strict=True, timeout=0.2)
        assert clip.copy("text") is False

    def test_timeout_reaps_child(self, monkeypatch):
        """A killed child is waited on afterwards."""
        events = []

        class FakeStdin:
            def write(self, data):
                pass

            def close(self):
                pass

        class FakeProc:
            def __init__(self, command, **kwargs):
                self.stdin = FakeStdin()

            def wait(self, timeout=None):
                events.append(("wait", timeout))
                if timeout is not None:
                    raise subprocess.TimeoutExpired("xclip", timeout)
                return -9

            def kill(self):
                events.append(("kill", None))

        monkeypatch.setattr(subprocess, "Popen", FakeProc)

        clip = CommandClipboard(["xclip"], strict=True, timeout=0.5)
        assert clip.copy("text") is False
        assert events == [("wait", 0.5), ("kill", None), ("wait", None)]
