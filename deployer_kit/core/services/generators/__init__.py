"""
Generators — render source files from resolved contract metadata.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``; writing it to disk is the caller's job.
"""
