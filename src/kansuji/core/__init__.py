"""
Core domain models, rendering, numeric conversion and contracts.

Everything here is pure: no I/O, no shared mutable state.
"""
