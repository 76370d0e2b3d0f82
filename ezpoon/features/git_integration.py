"""Pure-function git helpers.

Every function in this module is stateless: it takes explicit parameters
and returns a value.  Lookup failures never raise: a working directory
outside any repository simply maps to the global context.
"""

from __future__ import annotations

import os
import subprocess

from ..log import logger

GLOBAL_CONTEXT = "global"


def run_git(*args: str, cwd: str | None = None, timeout: float = 10) -> tuple[bool, str]:
    """Run a git command and return *(success, output)*."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=cwd or os.getcwd(),
        )
        return (
            result.returncode == 0,
            result.stdout.strip() if result.returncode == 0 else result.stderr.strip(),
        )
    except FileNotFoundError:
        return False, "git not found"
    except subprocess.TimeoutExpired:
        return False, "git command timed out"
    except Exception as exc:
        return False, str(exc)


def context_from_root(root: str) -> str:
    """Turn a repository root into a single, filesystem-safe path component."""
    context = root.strip().replace("/", "_")
    for sep in (os.sep, os.altsep):
        if sep:
            context = context.replace(sep, "_")
    return context


def resolve_context(cwd: str | None = None, timeout: float = 10) -> str:
    """Return the slot context for *cwd*: the git root, or ``"global"``."""
    ok, output = run_git("rev-parse", "--show-toplevel", cwd=cwd, timeout=timeout)
    if not ok or not output:
        logger.debug("No git root for %s (%s); using global context", cwd, output)
        return GLOBAL_CONTEXT
    return context_from_root(output)
