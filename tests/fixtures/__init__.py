"""
Test Fixtures and Utilities

Shared synthetic expense data for integration and CLI tests.
All test data is synthetic and does not contain real financial information.
"""
