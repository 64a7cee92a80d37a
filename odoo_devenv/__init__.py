"""
Overview
========

This library came out of a shell script used to prepare local odoo
development machines. The script installed docker when it was missing,
called itself again with sudo and with the docker group, then wrote the
odoo versions to run in a ``.env`` file used by a docker compose project.

Keeping that logic in a shell script made it hard to test, so it became
a small python package with a command line, ``odoo-devenv``, and an api
that can be reused by other tools.

The odoo versions are the three latest major versions. The latest one is
the default branch of the upstream odoo repository, for example ``18.0``
gives ``16``, ``17`` and ``18``. For each version, the directories
``custom``, ``design`` and ``enterprise`` are created next to the
docker-compose file so they can be mounted as addons paths.
"""
