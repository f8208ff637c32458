"""
Identicon package: deterministic avatar images derived from a string.

Modules:
- core: pipeline orchestration and the create_identicon entry point
- models: immutable stage records and errors
- hasher: input hashing
- color: fill color selection
- grid: mirrored grid construction and odd-cell filtering
- pixels: grid cells to canvas rectangles
- render: drawing and PNG encoding
- storage: writing the PNG to disk
"""
