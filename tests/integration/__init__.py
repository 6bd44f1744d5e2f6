"""
Integration tests.

Run against a real Redis with USE_REAL_REDIS=1; otherwise they fall back to
the in-memory store stand-in.
"""
