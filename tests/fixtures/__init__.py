"""
Test Fixtures and Utilities

Builders for synthetic subscription records and subscription files.
"""
