"""Unit tests for the bounded kubectl executor."""

from __future__ import annotations

import subprocess
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from ktwins.controllers.cluster.command_runner import (
    CommandResult,
    CommandRunner,
    cap_output,
    namespace_selector,
)

RUN_PATH = "ktwins.controllers.cluster.command_runner.subprocess.run"


def _completed(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> SimpleNamespace:
    return SimpleNamespace(stdout=stdout, stderr=stderr, returncode=returncode)


class TestNamespaceSelector:
    """Tests for namespace_selector."""

    @pytest.mark.parametrize("value", ["", "  ", "all", "ALL"])
    def test_all_namespaces(self, value: str) -> None:
        """Blank and ``all`` select every namespace."""
        assert namespace_selector(value) == ["-A"]

    def test_single_namespace(self) -> None:
        """Any other value is passed with ``-n``."""
        assert namespace_selector(" default ") == ["-n", "default"]

    def test_blank_without_all(self) -> None:
        """Diagnostics never use ``-A``; blank adds nothing."""
        assert namespace_selector("", allow_all=False) == []
        assert namespace_selector("kube-system", allow_all=False) == ["-n", "kube-system"]


class TestCapOutput:
    """Tests for cap_output."""

    def test_under_cap(self) -> None:
        """Short output passes through untouched."""
        assert cap_output(b"abc", 10) == (b"abc", False)

    def test_over_cap(self) -> None:
        """Long output is cut at the cap and flagged."""
        assert cap_output(b"abcdef", 4) == (b"abcd", True)


class TestCommandResult:
    """Tests for CommandResult.text."""

    def test_timeout_text(self) -> None:
        """A timed out command displays the timeout marker."""
        assert CommandResult(output="partial", timed_out=True).text == "timeout"

    def test_output_text(self) -> None:
        """Otherwise the output is displayed as-is."""
        assert CommandResult(output="pod/web").text == "pod/web"


class TestCommandRunner:
    """Tests for CommandRunner."""

    def test_build_command_with_context(self) -> None:
        """Context and request timeout precede the kubectl arguments."""
        runner = CommandRunner(context="prod")
        assert runner.build_command(["get", "pods"]) == [
            "kubectl",
            "--context",
            "prod",
            "--request-timeout=1s",
            "get",
            "pods",
        ]

    def test_build_command_without_context(self) -> None:
        """No context flag is added when none is configured."""
        runner = CommandRunner(binary="/usr/local/bin/kubectl", context="")
        assert runner.build_command(["get", "ns"])[:2] == [
            "/usr/local/bin/kubectl",
            "--request-timeout=1s",
        ]

    def test_run_merges_stdout_and_stderr(self) -> None:
        """stdout and stderr are combined into one text."""
        runner = CommandRunner()
        with patch(RUN_PATH, return_value=_completed(b"out\n", b"warn\n", 1)) as run:
            result = runner.run(["get", "pods"])
        assert result.output == "out\nwarn\n"
        assert result.returncode == 1
        assert result.timed_out is False
        _, kwargs = run.call_args
        assert kwargs["timeout"] == runner.timeout
        assert kwargs["check"] is False

    def test_run_caps_output(self) -> None:
        """Output beyond the byte cap is truncated."""
        runner = CommandRunner(max_output_bytes=4)
        with patch(RUN_PATH, return_value=_completed(b"abcdef")):
            result = runner.run(["get", "pods"])
        assert result.output == "abcd"
        assert result.truncated is True

    def test_run_replaces_invalid_utf8(self) -> None:
        """Undecodable bytes never raise."""
        runner = CommandRunner()
        with patch(RUN_PATH, return_value=_completed(b"ok \xff")):
            assert runner.run(["get", "pods"]).output.startswith("ok ")

    def test_run_timeout(self) -> None:
        """A process timeout returns the timeout marker."""
        runner = CommandRunner(timeout=1.2)
        with patch(
            RUN_PATH,
            side_effect=subprocess.TimeoutExpired(cmd="kubectl", timeout=1.2),
        ):
            result = runner.run(["get", "pods"])
        assert result.timed_out is True
        assert result.text == "timeout"

    def test_run_missing_binary(self) -> None:
        """A missing binary is reported as an error line."""
        runner = CommandRunner(binary="no-such-kubectl")
        with patch(RUN_PATH, side_effect=FileNotFoundError("no-such-kubectl")):
            text = runner.run_text(["get", "pods"])
        assert text.startswith("error: ")

    def test_run_timeout_override(self) -> None:
        """An explicit timeout replaces the default one."""
        runner = CommandRunner(timeout=1.2)
        run = MagicMock(return_value=_completed(b"ok"))
        with patch(RUN_PATH, run):
            runner.run(["logs", "web"], timeout=5.0)
        assert run.call_args.kwargs["timeout"] == 5.0

    def test_run_output_cap_override(self) -> None:
        """A per-call cap lets large ``-o name`` listings through whole."""
        listing = b"".join(b"pod/web-deployment-7d9f8c6b5-%05d\n" % index for index in range(3000))
        runner = CommandRunner()
        with patch(RUN_PATH, return_value=_completed(listing)):
            capped = runner.run(["get", "pods", "-o", "name"])
            whole = runner.run(["get", "pods", "-o", "name"], max_output_bytes=len(listing))
        assert capped.truncated is True
        assert whole.truncated is False
        assert whole.output.count("\n") == 3000
