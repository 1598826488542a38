"""Tests for server startup error scenarios.

Covers:
- Wrong-type config values from the environment
- Unknown keys and wrong types in pagereader.yaml
"""

from __future__ import annotations

import subprocess
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def _run_and_wait(
    env: dict[str, str], cwd: Path | None = None, timeout: int = 10
) -> subprocess.CompletedProcess[str]:
    """Start the server with stdin closed and wait for it to exit.

    Suitable for crash scenarios where the server exits before reading any input.
    """
    return subprocess.run(
        [sys.executable, "-m", "pagereader.server"],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        timeout=timeout,
        env=env,
        cwd=cwd,
    )


class TestBadConfigType:
    """Wrong-type config values crash the server before the transport starts."""

    def test_crashes_on_wrong_type_env(self, subprocess_env: dict[str, str]) -> None:
        env = {**subprocess_env, "PAGEREADER__CACHE__TTL_HOURS": "not-a-number"}
        result = _run_and_wait(env)
        assert result.returncode != 0
        assert "ttl_hours" in result.stderr

    def test_crashes_on_invalid_log_level(self, subprocess_env: dict[str, str]) -> None:
        env = {**subprocess_env, "PAGEREADER__LOGGING__LEVEL": "LOUD"}
        result = _run_and_wait(env)
        assert result.returncode != 0


class TestYamlConfig:
    def test_unknown_yaml_key_crashes(self, tmp_path: Path, subprocess_env: dict[str, str]) -> None:
        """A YAML typo ('ttl_hour') is rejected rather than silently ignored."""
        (tmp_path / "pagereader.yaml").write_text("cache:\n  ttl_hour: 12\n", encoding="utf-8")
        result = _run_and_wait(subprocess_env, cwd=tmp_path)
        assert result.returncode != 0

    def test_valid_yaml_starts_and_exits_cleanly(
        self, tmp_path: Path, subprocess_env: dict[str, str]
    ) -> None:
        """With stdin closed immediately, a valid config leads to a clean shutdown."""
        (tmp_path / "pagereader.yaml").write_text(
            "cache:\n  ttl_hours: 12\nlogging:\n  format: text\n", encoding="utf-8"
        )
        result = _run_and_wait(subprocess_env, cwd=tmp_path)
        assert result.returncode == 0
