"""Rendering layer for calculation results.

Keeps Pillow out of the CLI and the core: the CLI hands a ``TimeValue``
to ``card.save_card`` and never touches image objects directly.
"""

__all__ = [
    "card",
]
