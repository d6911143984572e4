"""CLI subcommands.

Every module in this package that defines a `command` object is
auto-registered by svg_theme.registry.discover(). The module docstring is
the command's `help` text.
"""
