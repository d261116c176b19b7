"""
Mission data module.

Geometry primitives, the immutable mission model, and the parser that
turns raw mission text into it.
"""
