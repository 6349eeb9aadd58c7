"""Tests for CLI commands."""

import json
import os
import subprocess
import sys

import pytest


@pytest.fixture
def cli_env(mock_feedboat_dir):
    """Environment for running the CLI against a temporary config dir."""
    env = os.environ.copy()
    env["FEEDBOAT_DIR"] = str(mock_feedboat_dir)
    return env


def run_cli(*args, env=None, input_text=None):
    """Run feedboat CLI command and return result."""
    cmd = [sys.executable, "-m", "feedboat.cli"] + list(args)
    result = subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        env=env,
        input=input_text,
    )
    return result


def read_config(feedboat_dir):
    return json.loads((feedboat_dir / "config.json").read_text())


class TestConfigCommands:
    """Tests for config show / config set."""

    def test_show_defaults(self, cli_env):
        result = run_cli("config", "show", env=cli_env)

        assert result.returncode == 0
        assert "debug = off" in result.stdout
        assert "cycle_next_key = v" in result.stdout
        assert "cycle_previous_key = g" in result.stdout

    def test_set_binding(self, cli_env, mock_feedboat_dir):
        result = run_cli("config", "set", "cycle_next_key", "n", env=cli_env)

        assert result.returncode == 0
        assert read_config(mock_feedboat_dir)["cycle_next_key"] == "n"
        assert "cycle_next_key = n" in run_cli("config", "show", env=cli_env).stdout

    def test_set_invalid_binding_fails(self, cli_env, mock_feedboat_dir):
        result = run_cli("config", "set", "cycle_next_key", "g", env=cli_env)

        assert result.returncode == 1
        assert "Error" in result.stdout
        assert not (mock_feedboat_dir / "config.json").exists()

    def test_set_unknown_key_fails(self, cli_env):
        result = run_cli("config", "set", "colour", "blue", env=cli_env)

        assert result.returncode == 1
        assert "Unknown config key" in result.stdout


class TestDebugCommands:
    """Tests for debug on/off."""

    def test_debug_on_and_off(self, cli_env, mock_feedboat_dir):
        result = run_cli("debug", "on", env=cli_env)
        assert result.returncode == 0
        assert read_config(mock_feedboat_dir)["debug"] is True

        result = run_cli("debug", "off", env=cli_env)
        assert result.returncode == 0
        assert read_config(mock_feedboat_dir)["debug"] is False


class TestKeysCommand:
    """Tests for the key binding table."""

    def test_lists_configured_chords(self, cli_env):
        run_cli("config", "set", "cycle_previous_key", "p", env=cli_env)

        result = run_cli("keys", env=cli_env)

        assert result.returncode == 0
        assert "Ctrl+V" in result.stdout
        assert "Ctrl+P" in result.stdout
        assert "Ctrl+C" in result.stdout


class TestStatusCommand:
    """Tests for status command."""

    def test_status_reports_invalid_keys(self, cli_env, mock_feedboat_dir):
        (mock_feedboat_dir / "config.json").write_text(
            json.dumps({"cycle_next_key": "x", "cycle_previous_key": "x"})
        )

        result = run_cli("status", env=cli_env)

        assert result.returncode == 0
        assert "both" in result.stdout


class TestEnvCommands:
    """Tests for env list/set/unset."""

    def test_env_round_trip(self, cli_env):
        assert "No env var overrides" in run_cli("env", "list", env=cli_env).stdout

        assert run_cli("env", "set", "FEEDBOAT_DEBUG", "true", env=cli_env).returncode == 0
        assert "FEEDBOAT_DEBUG=true" in run_cli("env", "list", env=cli_env).stdout
        assert "debug = on" in run_cli("config", "show", env=cli_env).stdout

        result = run_cli("env", "unset", "FEEDBOAT_DEBUG", env=cli_env)
        assert "Unset FEEDBOAT_DEBUG" in result.stdout
        result = run_cli("env", "unset", "FEEDBOAT_DEBUG", env=cli_env)
        assert "was not set" in result.stdout


def test_dashboard_refuses_invalid_bindings(cli_env, mock_feedboat_dir):
    """Launching with bad bindings exits before touching the terminal."""
    (mock_feedboat_dir / "config.json").write_text(
        json.dumps({"cycle_next_key": "1"})
    )

    result = run_cli(env=cli_env, input_text="")

    assert result.returncode == 1
    assert "cycle_next_key" in result.stdout


@pytest.mark.skipif(sys.platform == "win32", reason="needs a pty")
def test_quitting_dashboard_restores_terminal(cli_env):
    """Echo and line editing are back on after the dashboard exits."""
    import fcntl
    import select
    import struct
    import termios
    import time

    master, slave = os.openpty()
    fcntl.ioctl(slave, termios.TIOCSWINSZ, struct.pack("HHHH", 24, 80, 0, 0))
    before = termios.tcgetattr(slave)
    env = dict(cli_env, TERM="xterm-256color")
    proc = subprocess.Popen(
        [sys.executable, "-m", "feedboat.cli"],
        stdin=slave,
        stdout=slave,
        stderr=slave,
        env=env,
    )

    def drain(until, timeout=15):
        output = b""
        deadline = time.monotonic() + timeout
        while not until(output) and time.monotonic() < deadline:
            ready, _, _ = select.select([master], [], [], 0.1)
            if ready:
                try:
                    output += os.read(master, 4096)
                except OSError:
                    break
        return output

    try:
        assert b"Your Feeds" in drain(lambda out: b"Your Feeds" in out)
        os.write(master, b"q")
        drain(lambda out: proc.poll() is not None)

        assert proc.wait(timeout=5) == 0
        after = termios.tcgetattr(slave)
        assert after[3] & termios.ECHO
        assert after[3] & termios.ICANON
        assert after[3] == before[3]
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
        os.close(slave)
        os.close(master)
