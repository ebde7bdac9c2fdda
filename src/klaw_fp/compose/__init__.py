"""Function composition utilities."""

from klaw_fp.compose.pipe import compose, pipe, pipe_async

__all__ = ['compose', 'pipe', 'pipe_async']
