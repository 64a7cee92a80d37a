import sys
import logging

from ..compat import pipe, quote
from ..exceptions import InstallationError


_logger = logging.getLogger(__name__)


POST_INSTALL_FLAG = '--post-install'


def self_command():
    """
    Command line calling this program again with the same interpreter.
    """
    return [sys.executable, '-m', 'odoo_devenv']


def call_sudo_entrypoint(odoo_env):
    """
    Call odoo-devenv again with sudo.

    The process running as root only installs docker and the compose
    plugin, then it exits. The original flags are passed along so the
    root process takes the same decisions.

    Raises:
        InstallationError: when the root process failed.
    """
    command = ["sudo", "-E", "--"]
    args = self_command() + odoo_env.context.flags()

    _logger.info("This script will now re-run with sudo.")

    ret = pipe(command + args)

    if ret != 0:
        raise InstallationError(
            "Installation with sudo failed with returncode {}".format(ret)
        )

    return ret


def call_group_entrypoint(odoo_env, group='docker'):
    """
    Call odoo-devenv again in a session where group is active.

    The calling process isn't part of the docker group when docker was
    just installed. ``sg`` starts a new session with the group membership
    so the docker socket is reachable without logging out.

    Returns:
        int: The returncode of the new session.
    """
    args = self_command() + [POST_INSTALL_FLAG] + odoo_env.context.flags()
    shell_command = " ".join(quote(arg) for arg in args)

    _logger.info(
        "Installation finished. Re-executing with new group permissions..."
    )

    return pipe(['sg', group, '-c', shell_command])
