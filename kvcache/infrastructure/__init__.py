"""
Infrastructure Module

Adapters over external systems (Redis).
"""
