"""Logic for invoking the go tool and capturing its combined output."""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from licenseaudit.errors import GoCommandError

logger = logging.getLogger(__name__)


def run_go(
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    *,
    go_binary: str = "go",
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> str:
    """Run ``go <args>`` and return stdout and stderr as one string.

    Raises GoCommandError, carrying the command line and the output, when the
    tool is missing, times out or exits with a non-zero status.
    """
    cmd = [go_binary, *args]
    cmd_str = " ".join(cmd)
    logger.debug("Running: %s", cmd_str)
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            env=dict(env) if env is not None else None,
            cwd=cwd,
            timeout=timeout,
            check=False,
        )
    except OSError as exc:
        msg = f"{cmd_str} could not be run: {exc}"
        raise GoCommandError(msg) from exc
    except subprocess.TimeoutExpired as exc:
        msg = f"{cmd_str} timed out after {timeout}s"
        raise GoCommandError(msg) from exc

    out = proc.stdout.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        msg = f"{cmd_str} failed with:\n{out}"
        raise GoCommandError(msg)
    return out
