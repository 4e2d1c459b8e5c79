from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    output: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    merge_stderr: bool = True,
    check: bool = False,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command to completion with consistent logging.

    - Always logs the command.
    - Blocks until the process exits; no timeout is applied.
    - stdout and stderr share one captured stream unless merge_stderr is off,
      in which case stderr is appended after stdout.
    - Launch failures (missing binary, permission denied) propagate as OSError.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, output="")

    p = subprocess.run(
        argv_list,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
        encoding="utf-8",
        errors="replace",
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )

    output = p.stdout or ""
    if not merge_stderr and p.stderr:
        output += p.stderr

    if output:
        logger.debug("OUTPUT %s", output.strip())

    if check and p.returncode != 0:
        raise RuntimeError(f"Command failed ({p.returncode}): {_fmt_argv(argv_list)}\n{output}")

    return CmdResult(argv=argv_list, returncode=p.returncode, output=output)
