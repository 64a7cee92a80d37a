import os
import logging
import platform
import tempfile
from pathlib import Path

import distro
import requests
from packaging.version import Version, InvalidVersion

from ..compat import pipe, is_root
from ..exceptions import InstallationError, DownloadError, PrivilegeError
from ..utils import download, fetch_json

_logger = logging.getLogger(__name__)


COMPOSE_REPOSITORY = "docker/compose"
COMPOSE_DOWNLOAD_URL = (
    "https://github.com/{repository}/releases/download/"
    "{tag}/docker-compose-{kernel}-{machine}"
)

# rwxr-xr-x
PLUGIN_MODE = 0o755


def install_docker(odoo_env):
    """
    Install docker engine with the official convenience script.
    """
    context = odoo_env.context

    _logger.info(
        "Docker not found. Installing Docker Engine on %s...",
        distro.name(pretty=True) or platform.system()
    )

    with tempfile.TemporaryDirectory() as directory:
        script = Path(directory) / 'get-docker.sh'

        try:
            download(context.docker_script_url, script)
        except DownloadError as exc:
            raise DownloadError(
                "Failed to download the Docker installation script. "
                "Please check your internet connection."
            ) from exc

        ret = pipe(['sh', str(script)])

    # Something went wrong, docker is required for everything else
    if ret != 0:
        raise InstallationError("Docker installation script failed")

    _logger.info("Starting and enabling the Docker service...")
    if pipe(['systemctl', 'start', 'docker']) != 0:
        raise InstallationError("Failed to start the Docker service")

    if pipe(['systemctl', 'enable', 'docker']) != 0:
        raise InstallationError("Failed to enable the Docker service")

    add_user_to_group(context.sudo_user)

    _logger.info("Docker installed successfully.")


def add_user_to_group(user, group='docker'):
    if not user:
        _logger.warning(
            "Could not determine the original user. You may need to "
            "manually run: 'sudo usermod -aG %s $USER'",
            group
        )
        return

    _logger.info("Adding user '%s' to the '%s' group...", user, group)

    ret = pipe(['usermod', '-aG', group, user])

    if ret != 0:
        raise InstallationError(
            "Failed to add user '{}' to the '{}' group".format(user, group)
        )

    _logger.info(
        "IMPORTANT: User '%s' must log out and log back in for group "
        "changes to take effect in their terminal.",
        user
    )


def latest_compose_release(odoo_env):
    """
    Returns the tag of the latest docker compose release.
    """
    context = odoo_env.context

    url = "{api}/repos/{repository}/releases/latest".format(
        api=context.github_api,
        repository=COMPOSE_REPOSITORY,
    )

    try:
        release = fetch_json(url, timeout=context.http_timeout)
    except (requests.RequestException, ValueError) as exc:
        raise InstallationError(
            "Could not automatically determine the latest Docker Compose "
            "version."
        ) from exc

    tag = release.get('tag_name') if isinstance(release, dict) else None

    if not is_release_tag(tag):
        raise InstallationError(
            "Could not automatically determine the latest Docker Compose "
            "version."
        )

    return tag


def is_release_tag(tag):
    """
    Check that tag is a final release tag like ``v2.29.1``.
    """
    if not tag or not tag.startswith('v'):
        return False

    try:
        version = Version(tag[1:])
    except InvalidVersion:
        return False

    return (
        len(version.release) == 3 and
        not version.is_prerelease and
        not version.is_postrelease and
        not version.is_devrelease and
        version.local is None and
        str(version) == tag[1:]
    )


def compose_download_url(tag):
    return COMPOSE_DOWNLOAD_URL.format(
        repository=COMPOSE_REPOSITORY,
        tag=tag,
        kernel=platform.system().lower(),
        machine=platform.machine(),
    )


def install_docker_compose(odoo_env):
    """
    Install the docker compose cli plugin.
    """
    _logger.info("Docker Compose not found. Installing the plugin...")

    install_dir = odoo_env.context.compose_plugin_dir
    install_dir.mkdir(parents=True, exist_ok=True)

    _logger.info("Fetching the latest Docker Compose version...")
    tag = latest_compose_release(odoo_env)
    _logger.info("Latest version is %s.", tag)

    url = compose_download_url(tag)
    destination = install_dir / 'docker-compose'

    _logger.info("Downloading Docker Compose from %s...", url)

    # Download next to the destination so the rename stays on one filesystem
    fd, partial = tempfile.mkstemp(
        dir=str(install_dir),
        prefix='.docker-compose-'
    )
    os.close(fd)
    partial = Path(partial)

    try:
        download(url, partial)

        os.chmod(str(partial), PLUGIN_MODE)
        os.replace(str(partial), str(destination))
    finally:
        if partial.exists():
            partial.unlink()

    _logger.info("Docker Compose plugin was installed successfully!")

    return destination


def install(odoo_env):
    """
    Install everything missing. Must be called as root.
    """
    if not is_root():
        raise PrivilegeError("Installation tasks must be run as root")

    _logger.info("Running with root privileges for installation...")

    docker = odoo_env.docker

    if not docker.installed():
        install_docker(odoo_env)
    else:
        _logger.info("Docker is already installed.")

    if not docker.compose_available():
        install_docker_compose(odoo_env)
    else:
        _logger.info("Docker Compose is already installed.")
        docker.show_compose_version()

    _logger.info("Installation tasks complete. Exiting root mode.")

    return 0
