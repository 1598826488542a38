"""Wire-level integration tests for the MCP tool result envelope."""

from __future__ import annotations

import json
import subprocess
import sys
from typing import Any


def _call_tool(env: dict[str, str], name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Run one initialize + tools/call exchange against a server subprocess."""
    proc = subprocess.Popen(
        [sys.executable, "-m", "pagereader.server"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        env=env,
    )

    assert proc.stdin is not None
    assert proc.stdout is not None
    assert proc.stderr is not None

    messages = [
        {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "initialize",
            "params": {
                "protocolVersion": "2025-06-18",
                "capabilities": {},
                "clientInfo": {"name": "pytest", "version": "0"},
            },
        },
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {
            "jsonrpc": "2.0",
            "id": 2,
            "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        },
    ]

    for message in messages:
        proc.stdin.write(json.dumps(message) + "\n")
    proc.stdin.close()

    stdout_lines = [line for line in proc.stdout.read().splitlines() if line.strip()]
    proc.stderr.read()  # Drain for clean process shutdown on all platforms
    proc.wait(timeout=10)

    responses = [json.loads(line) for line in stdout_lines]
    return next(response for response in responses if response.get("id") == 2)


def _error_payload(tool_response: dict[str, Any]) -> dict[str, Any]:
    assert tool_response["result"]["isError"] is True
    text_payload = tool_response["result"]["content"][0]["text"]
    assert "Error executing tool" not in text_payload
    return json.loads(text_payload)["error"]


def test_invalid_url_serializes_to_structured_tool_error(subprocess_env: dict[str, str]) -> None:
    response = _call_tool(subprocess_env, "read_web_page", {"url": "ftp://example.com/x"})
    error = _error_payload(response)
    assert error["code"] == "INVALID_INPUT"
    assert error["recoverable"] is False
    assert "url must use http or https scheme" in error["message"]


def test_missing_url_serializes_to_structured_tool_error(subprocess_env: dict[str, str]) -> None:
    response = _call_tool(subprocess_env, "read_web_page", {"objective": "pricing"})
    error = _error_payload(response)
    assert error["code"] == "INVALID_INPUT"
    assert "url" in error["message"]


def test_unknown_tool_serializes_to_structured_tool_error(subprocess_env: dict[str, str]) -> None:
    response = _call_tool(subprocess_env, "resolve_library", {"query": "x"})
    error = _error_payload(response)
    assert error["code"] == "UNKNOWN_TOOL"
    assert "resolve_library" in error["message"]
