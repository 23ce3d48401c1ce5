"""
Core Utilities Package

Shared primitives used across the taxonomy, search and deduction packages.

This package provides:
- Currency handling with integer cents and Decimal tax arithmetic
- Expense record model handed over by the expense storage service
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_output_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    format_cents,
    format_decimal_dollars,
    parse_dollars_to_cents,
    to_decimal,
)
from .dates import FinancialDate
from .models import ExpenseRecord
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    # Data models
    "ExpenseRecord",
    "FinancialDate",
    "Money",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "format_decimal_dollars",
    "get_config",
    "get_data_dir",
    "get_output_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_dollars_to_cents",
    "reload_config",
    "to_decimal",
]
