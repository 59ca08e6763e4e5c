"""Entrypoints (inbound adapters) for dashkit.

Expose the helpers to the outside world. Currently this is the ``dashkit``
command-line interface, which parses input, calls the helper functions and
prints their results.
"""
