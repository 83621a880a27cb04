"""
JSON stdin/stdout tools, one per matrix operation.

Run any of them as ``python -m square_matrix.tools.<name>`` or through the
console scripts declared in pyproject.toml.
"""
