"""Directory traversal and tree rendering.

This module walks a directory through a minimal listing interface, drops
ignored entries, and renders the result as an indented text tree bounded by a
maximum depth.
"""
