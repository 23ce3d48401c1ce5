"""
Test Suite for Medexpense

Test Structure:
- fixtures/: Shared synthetic expense data
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

Test Data:
All expense records are synthetic. Real financial data is never included in tests.
"""
