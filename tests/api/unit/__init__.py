"""Unit tests for API components.

This package contains isolated unit tests for:
- Dependency injection
- Error handling
"""
