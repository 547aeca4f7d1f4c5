"""Bounded kubectl executor.

Every cluster query funnels through ``CommandRunner.run``, which enforces a
wall-clock timeout and an output cap and always returns text. Callers render
whatever comes back; nothing here raises on command failure.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from ktwins.constants.defaults import KUBECTL_BINARY_DEFAULT
from ktwins.constants.limits import MAX_OUTPUT_BYTES
from ktwins.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, KUBECTL_COMMAND_TIMEOUT
from ktwins.constants.values import TIMEOUT_MARKER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one bounded command invocation."""

    output: str
    timed_out: bool = False
    truncated: bool = False
    returncode: int | None = None

    @property
    def text(self) -> str:
        """Text to display: the timeout marker or the (possibly capped) output."""
        return TIMEOUT_MARKER if self.timed_out else self.output


def namespace_selector(namespace: str, *, allow_all: bool = True) -> list[str]:
    """Build kubectl namespace arguments for a filter value.

    Blank (or ``all`` when ``allow_all``) selects every namespace with ``-A``;
    without ``allow_all`` a blank value adds no arguments at all.
    """
    trimmed = (namespace or "").strip()
    if not trimmed:
        return ["-A"] if allow_all else []
    if allow_all and trimmed.lower() == "all":
        return ["-A"]
    return ["-n", trimmed]


def cap_output(raw: bytes, max_bytes: int) -> tuple[bytes, bool]:
    """Trim ``raw`` to ``max_bytes``; returns the bytes and whether they were cut."""
    if len(raw) <= max_bytes:
        return raw, False
    return raw[:max_bytes], True


class CommandRunner:
    """Runs read-only kubectl commands with a hard timeout and output cap."""

    def __init__(
        self,
        *,
        binary: str = KUBECTL_BINARY_DEFAULT,
        context: str | None = None,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        timeout: float = KUBECTL_COMMAND_TIMEOUT,
        max_output_bytes: int = MAX_OUTPUT_BYTES,
    ) -> None:
        self.binary = binary
        self.context = context or None
        self.request_timeout = request_timeout
        self.timeout = timeout
        self.max_output_bytes = max_output_bytes

    def build_command(self, args: tuple[str, ...] | list[str]) -> list[str]:
        """Full argv for a kubectl invocation."""
        cmd = [self.binary]
        if self.context:
            cmd.extend(["--context", self.context])
        if self.request_timeout:
            cmd.append(f"--request-timeout={self.request_timeout}")
        cmd.extend(args)
        return cmd

    def run(
        self,
        args: tuple[str, ...] | list[str],
        timeout: float | None = None,
        max_output_bytes: int | None = None,
    ) -> CommandResult:
        """Run kubectl synchronously (thread-safe wrapper target).

        stdout and stderr are merged into one capped text; a non-zero exit
        code is not an error here since kubectl explains failures on stderr.
        ``timeout`` and ``max_output_bytes`` override the runner defaults.
        """
        cmd = self.build_command(args)
        effective_timeout = timeout if timeout is not None else self.timeout
        output_cap = max_output_bytes or self.max_output_bytes
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=effective_timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning(
                "kubectl timed out after %.1fs: %s", effective_timeout, " ".join(args)
            )
            return CommandResult(output="", timed_out=True)
        except OSError as exc:
            logger.warning("kubectl could not be started: %s", exc)
            return CommandResult(output=f"error: {exc}")

        raw, truncated = cap_output(
            (result.stdout or b"") + (result.stderr or b""),
            output_cap,
        )
        if truncated:
            logger.debug(
                "kubectl output capped at %d bytes: %s",
                output_cap,
                " ".join(args),
            )
        return CommandResult(
            output=raw.decode("utf-8", errors="replace"),
            truncated=truncated,
            returncode=result.returncode,
        )

    def run_text(
        self,
        args: tuple[str, ...] | list[str],
        timeout: float | None = None,
    ) -> str:
        """Run kubectl and return only the display text."""
        return self.run(args, timeout=timeout).text
