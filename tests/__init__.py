"""
Test suite for the upguard-cli tool.

This package contains tests covering:
- Request dispatch, error normalization and transport security
- Page-number pagination over list endpoints
- Node and node group API wrappers
- Configuration loading and credential resolution
- CLI operations and output strategies
"""
