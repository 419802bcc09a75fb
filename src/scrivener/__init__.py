"""Keeps track of plaintext note files by name.

If you installed via ``pip``, run ``scrivener -h`` to get help.

To use the Python API, look at :class:`scrivener.api.Scrivener`
"""
