"""btex API layer.

Each module exports exactly one function or class, following the
single file == function/class rule.
"""
