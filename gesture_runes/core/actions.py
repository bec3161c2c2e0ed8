"""
Shell command execution for recognized gestures.
"""

import subprocess
import logging

logger = logging.getLogger(__name__)


def run_command(command: str, shell: str = 'bash') -> subprocess.Popen:
    """Start command through the shell without waiting for it.

    The child gets its own session and no standard streams, so it keeps
    running after this process exits.
    """
    logger.info("Running command: %s", command)
    return subprocess.Popen(
        [shell, '-c', command],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
