"""Built-in CLI commands.

* :mod:`~swagger_catalog.commands.inspect` -- ``operations``, ``show``, ``info``.
* :mod:`~swagger_catalog.commands.config` -- ``config show``, ``config path``.
"""
