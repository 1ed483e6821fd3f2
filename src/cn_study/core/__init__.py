"""
Core Package

Immutable data models, payload schema validation and serialization
shared by the loader, the round builders and the host shell.
"""
