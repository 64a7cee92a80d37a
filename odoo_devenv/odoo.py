"""
Module
------

Collection of API that can be used to prepare a local odoo development
environment.

There are multiple use cases in which you'd want to use an api
instead of the command line.

Here are a few notable example:

- Finding the odoo versions currently maintained upstream
- Creating the addons directories of a docker compose project
"""
from .api.environment import Environment
