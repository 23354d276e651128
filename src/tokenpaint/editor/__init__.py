"""Editor package containing syntax classification for rendering surfaces."""

from . import syntax

__all__ = ["syntax"]
