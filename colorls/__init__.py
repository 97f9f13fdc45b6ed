"""Public package surface for colorls.

Exports ``main`` for programmatic CLI invocation.
The layout engine lives in ``attributes``, ``width``, ``layout`` and ``render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
