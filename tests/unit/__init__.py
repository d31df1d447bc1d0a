"""
Unit tests that mirror the source code structure.

Tests individual components in isolation with fake collaborators.
"""
