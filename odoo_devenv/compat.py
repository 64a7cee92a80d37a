"""
Compatibility
=============

This module provides a common interface to call external programs. This
is an internal module and you shouldn't import things here in your project
as they may be subject to change or disapear without notice.
"""
import sys
import signal
import shlex
import os
import subprocess
import logging

_logger = logging.getLogger(__name__)

SIGSEGV = signal.SIGSEGV.value
quote = shlex.quote


def pipe(args, env=None, cwd=None):
    """
    Call the process with std(in,out,err)

    Parameters:
        args (List<str>): A list of parameters to be passed to Popen.
        env (Dict<str, str>): Extra environment variables for the process.
        cwd (Path): Directory in which the process is started.

    Returns:
        returncode (int): The returncode of the program
    """
    _logger.debug("Executing external command %s", " ".join(args))

    environ = os.environ.copy()
    environ['DEBIAN_FRONTEND'] = 'noninteractive'

    if env:
        environ.update(env)

    process = subprocess.Popen(
        args,
        stdin=sys.stdin,
        stdout=sys.stdout,
        stderr=sys.stderr,
        env=environ,
        cwd=str(cwd) if cwd else None,
    )

    process.wait()

    _logger.debug(
        "External command execution completed with returncode(%s)",
        process.returncode
    )

    if process.returncode == -SIGSEGV:
        _logger.info("PIPE call segfaulted")
        _logger.info("Failed to execute %s", args)

    return process.returncode


def succeeds(args):
    """
    Run the process silently and tell if it exited with 0.

    A missing executable counts as a failure.
    """
    try:
        ret = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False

    return ret.returncode == 0


def is_root():
    return os.geteuid() == 0


def host_ids():
    return os.getuid(), os.getgid()
