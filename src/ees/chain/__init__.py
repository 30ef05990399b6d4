"""ees chain rendering - compact and expanded views of an error's causes."""

from .renderer import ErrorChain, iter_chain, render_chain

__all__ = [
    "ErrorChain",
    "iter_chain",
    "render_chain",
]
