import logging
from collections import namedtuple

import giturlparse
import requests
from dotenv import dotenv_values

from ..utils import fetch_json


_logger = logging.getLogger(__name__)


ENV_KEYS = ('VERSION_1', 'VERSION_2', 'VERSION_3')


class VersionTriple(namedtuple('VersionTriple', ['oldest', 'middle', 'latest'])):
    """
    Three consecutive odoo major versions.
    """
    __slots__ = ()

    @classmethod
    def from_latest(klass, latest):
        if latest < 2:
            raise ValueError(
                "Latest version must be at least 2, got {}".format(latest)
            )
        return klass(latest - 2, latest - 1, latest)

    def to_env(self):
        return dict(zip(ENV_KEYS, (str(version) for version in self)))

    @classmethod
    def from_env(klass, values):
        """
        Load a triple from a mapping of environment values.

        Returns None when a key is missing or isn't a number.
        """
        try:
            versions = [int(values[key]) for key in ENV_KEYS]
        except (KeyError, TypeError, ValueError):
            return None

        if any(version < 0 for version in versions):
            return None

        return klass(*versions)


def parse_default_branch(branch):
    """
    Parse the major version out of a branch name like ``18.0``.

    Returns:
        int: The major version or None if the branch doesn't start with
        a number.
    """
    if not branch:
        return None

    major = branch.split('.', 1)[0]

    if not (major.isascii() and major.isdigit()):
        return None

    return int(major)


class VersionApi(object):

    def __init__(self, env):
        self.environment = env

    @property
    def context(self):
        return self.environment.context

    def repository_api_url(self):
        parsed = giturlparse.parse(self.context.odoo_repository)

        if not parsed.valid:
            raise ValueError(
                "Invalid repository url {}".format(
                    self.context.odoo_repository
                )
            )

        return "{api}/repos/{owner}/{repo}".format(
            api=self.context.github_api,
            owner=parsed.owner,
            repo=parsed.repo,
        )

    def default_branch(self):
        """
        Fetch the default branch of the upstream repository.

        Returns None and logs a warning when it can't be determined.
        """
        try:
            info = fetch_json(
                self.repository_api_url(),
                timeout=self.context.http_timeout
            )
        except (requests.RequestException, ValueError) as exc:
            _logger.warning(
                "Could not fetch Odoo repository information: %s", exc
            )
            return None

        branch = info.get('default_branch') if isinstance(info, dict) else None

        if not branch:
            _logger.warning(
                "Could not determine the default branch of %s",
                self.context.odoo_repository
            )
            return None

        return branch

    def latest(self):
        """
        Derive the version triple from the upstream default branch.
        """
        branch = self.default_branch()

        if branch is None:
            return None

        latest = parse_default_branch(branch)

        if latest is None or latest < 2:
            _logger.warning(
                "Failed to parse a valid version number from branch '%s'",
                branch
            )
            return None

        _logger.info("Latest Odoo version detected: %s.0", latest)

        return VersionTriple.from_latest(latest)

    def save(self, versions):
        env_file = self.context.env_file

        with env_file.open('w') as fout:
            for key, value in versions.to_env().items():
                fout.write("{}={}\n".format(key, value))

        _logger.info("Wrote %s", env_file)

    def load(self):
        env_file = self.context.env_file

        if not env_file.exists():
            return None

        return VersionTriple.from_env(dotenv_values(env_file))

    def derive(self):
        """
        Derive the versions and persist them in the environment file.

        The environment file is left untouched when the versions can't be
        derived.
        """
        versions = self.latest()

        if versions is None:
            _logger.warning("Skipping the creation of %s", self.context.env_file)
            return None

        _logger.info(
            "Using versions %s.0, %s.0 and %s.0",
            *versions
        )
        self.save(versions)

        return versions
