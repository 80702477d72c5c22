"""Running shell and vtysh commands for the monitoring views."""

from __future__ import annotations

import logging
import subprocess

_LOG = logging.getLogger(__name__)
_LOG_OUTPUT_LIMIT = 500
_NO_DATA = "No OSPF data received"


class CommandError(Exception):
    """A command could not be run or finished unsuccessfully."""

    def __init__(self, message: str, *, output: str = "", exit_code: int = -1) -> None:
        super().__init__(message)
        self.output = output
        self.exit_code = exit_code


class CommandTimeout(CommandError):
    """A command did not finish within its timeout."""


def _decode(raw: bytes | str | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode(errors="replace")
    return raw


def _truncate_for_log(output: str) -> str:
    if len(output) > _LOG_OUTPUT_LIMIT:
        return output[:_LOG_OUTPUT_LIMIT] + "... [truncated]"
    return output


def _exit_status(returncode: int) -> str:
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status {returncode}"


def run_custom_command(
    active_shell: str,
    command: str,
    timeout: float,
    logger: logging.Logger | None = None,
) -> str:
    """Run ``command`` in ``active_shell`` and return its combined output.

    With ``vtysh`` the command is passed to ``vtysh -c``; otherwise it is split
    on whitespace and executed directly. ``timeout`` is in seconds.
    """
    log = logger or _LOG
    log.info(
        "Executing command",
        extra={"attrs": {"shell": active_shell, "command": command, "timeout": timeout}},
    )

    if active_shell == "vtysh":
        args = ["vtysh", "-c", command]
    else:
        args = command.split()
        if not args:
            log.error("Empty command provided", extra={"attrs": {"error": "no command provided"}})
            raise CommandError("no command provided")

    log.debug("Starting command execution")
    try:
        completed = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        partial = _decode(exc.output)
        log.warning(
            "Command timed out",
            extra={"attrs": {"error": "command timed out", "output_so_far": partial}},
        )
        raise CommandTimeout("command timed out", output=partial) from exc
    except OSError as exc:
        log.error("Failed to start command", extra={"attrs": {"error": str(exc)}})
        raise

    output = _decode(completed.stdout)
    if completed.returncode != 0:
        status = _exit_status(completed.returncode)
        log.error(
            "Command execution failed",
            extra={
                "attrs": {
                    "error": status,
                    "output": _truncate_for_log(output),
                    "exit_code": completed.returncode,
                }
            },
        )
        raise CommandError(
            f"command error: {status}\nOutput: {output}",
            output=output,
            exit_code=completed.returncode,
        )

    log.info(
        "Command executed successfully",
        extra={"attrs": {"output": _truncate_for_log(output), "output_length": len(output)}},
    )
    return output


def _vtysh_output(command: str) -> str:
    completed = subprocess.run(["vtysh", "-c", command], stdout=subprocess.PIPE, check=True)
    return _decode(completed.stdout)


def get_running_config(logger: logging.Logger | None = None) -> str:
    """Return the router's running configuration as reported by vtysh."""
    try:
        return _vtysh_output("show running-config")
    except (OSError, subprocess.CalledProcessError) as exc:
        if logger is not None:
            logger.error("Error fetching OSPF Running-Config: %s", exc)
        raise CommandError(f"error fetching OSPF Running-Config: {exc}") from exc


def get_ospf_data(logger: logging.Logger | None = None) -> str:
    """Return the OSPF neighbor listing, prefixed with a heading line."""
    try:
        output = _vtysh_output("show ip ospf neighbor")
    except (OSError, subprocess.CalledProcessError) as exc:
        if logger is not None:
            logger.error("Error on getting ospf data: %s", exc)
        raise CommandError(f"error fetching OSPF neighbor data: {exc}") from exc
    return f"OSPF Neighbors:\n{output}"


def show_running_config(data: str) -> list[str]:
    """Split running-config text into lines, or a placeholder when empty."""
    if not data:
        return [_NO_DATA]
    return data.split("\n")


def detect_ospf_anomalies(data: str) -> list[str]:
    """Split OSPF output into lines, or a placeholder when empty."""
    if not data:
        return [_NO_DATA]
    return data.split("\n")