"""Adapters for FAKEKIT.

Concrete implementations of `fakekit.interfaces` bound to a test framework
(pytest) or to in-memory collection.
"""
