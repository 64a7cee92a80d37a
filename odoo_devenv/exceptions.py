class BootstrapError(Exception):
    """
    Base class of every error that stops the bootstrap.

    The command line prints the message on stderr and exits with
    ``exit_code``.
    """
    exit_code = 1


class InstallationError(BootstrapError):
    pass


class DownloadError(InstallationError):
    pass


class PrivilegeError(BootstrapError):
    pass


class ComposeUnavailable(BootstrapError):
    pass


class ComposeError(BootstrapError):
    pass


class DaemonUnreachable(BootstrapError):
    pass


class ConfigurationError(BootstrapError):
    pass
