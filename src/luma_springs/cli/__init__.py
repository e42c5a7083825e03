"""
CLI entry points for luma-springs.

- explore: generate, relax, gradient, luminance and config subcommands
"""

from .explore import main as explore_main

__all__ = [
    "explore_main",
]
