"""
Command Line Interface Package

Command Structure:
- medexpense: Main entry point with utility commands (version, config)
- medexpense categories / search / resolve: Taxonomy browsing and classification
- medexpense threshold / schedule-a: Schedule A deduction tools
"""
