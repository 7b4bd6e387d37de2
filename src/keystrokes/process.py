import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from keystrokes.errors import HelperLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HelperResult:
    argv: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_helper(
    argv: Sequence[str],
    env: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> HelperResult:
    """Run a helper process to completion and capture its output.

    ``argv`` is passed straight to the OS without a shell. ``env`` entries
    are added on top of the current environment. With ``timeout=None`` the
    call blocks until the child exits.

    Raises:
        HelperLaunchError: If the interpreter is missing, not executable,
            or exceeds ``timeout``.
    """
    argv = tuple(argv)
    child_env = None
    if env:
        child_env = dict(os.environ)
        child_env.update(env)

    logger.debug("Running helper %s", argv[0])
    try:
        completed = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=child_env,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise HelperLaunchError(
            f"{argv[0]} did not finish within {timeout}s") from exc
    except OSError as exc:
        raise HelperLaunchError(f"{argv[0]}: {exc.strerror or exc}") from exc

    result = HelperResult(
        argv=argv,
        returncode=completed.returncode,
        stdout=completed.stdout.decode("utf-8", errors="replace").strip(),
        stderr=completed.stderr.decode("utf-8", errors="replace").strip(),
    )
    logger.debug("Helper %s exited with %s", argv[0], result.returncode)
    return result
