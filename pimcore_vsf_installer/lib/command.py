from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    cwd: str | None = None,
    output_path: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - When output_path is given, stdout and stderr are appended to that file;
      otherwise the child inherits the terminal.
    - dry_run logs but does not execute.
    - A non-zero exit is reported in the result, not raised.
    """

    argv_list = list(argv)
    logger.info("CMD %s (cwd=%s)", _fmt_argv(argv_list), cwd or ".")

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0)

    if output_path:
        with open(output_path, "a", encoding="utf-8") as out:
            out.write(f"$ {_fmt_argv(argv_list)}\n")
            out.flush()
            p = subprocess.run(argv_list, cwd=cwd, stdout=out, stderr=subprocess.STDOUT)
    else:
        p = subprocess.run(argv_list, cwd=cwd)

    logger.info("CMD exited with %s: %s", p.returncode, _fmt_argv(argv_list))

    return CmdResult(argv=argv_list, returncode=p.returncode)
