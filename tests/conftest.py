"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from medexpense.classification.resolver import CategoryResolver
from medexpense.core.dates import FinancialDate
from medexpense.core.models import ExpenseRecord
from medexpense.core.money import Money
from medexpense.search.engine import SearchEngine
from medexpense.taxonomy.models import DOCTOR_PRESCRIBED_ONLY, MedicalCategory, MedicalSubcategory
from medexpense.taxonomy.store import TaxonomyStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture(scope="session")
def default_store() -> TaxonomyStore:
    """The compiled-in taxonomy."""
    return TaxonomyStore.default()


@pytest.fixture
def engine(default_store) -> SearchEngine:
    return SearchEngine(default_store)


@pytest.fixture
def resolver(default_store) -> CategoryResolver:
    return CategoryResolver(default_store)


@pytest.fixture
def fixture_categories() -> list[MedicalCategory]:
    """Small hand-built taxonomy for exact scoring assertions."""
    return [
        MedicalCategory(
            id="alpha",
            label="Alpha Care",
            irs_reference_tag="alpha_tag",
            description="Alpha description",
            search_terms=("alpha", "shared"),
            subcategories=(
                MedicalSubcategory(
                    id="alpha-one",
                    label="Alpha One",
                    irs_reference_tag="alpha_one_tag",
                    description="First alpha subcategory",
                    search_terms=("shared",),
                    examples=("Example widget",),
                ),
                MedicalSubcategory(
                    id="alpha-two",
                    label="Alpha Two",
                    irs_reference_tag="alpha_two_tag",
                    description="Second alpha subcategory",
                    search_terms=("shared",),
                ),
            ),
        ),
        MedicalCategory(
            id="beta",
            label="Beta Care",
            irs_reference_tag="beta_tag",
            description="Beta description mentions shared",
            search_terms=("beta", "shared"),
        ),
        MedicalCategory(
            id=DOCTOR_PRESCRIBED_ONLY,
            label="Prescribed Only",
            irs_reference_tag=DOCTOR_PRESCRIBED_ONLY,
            description="Deductible only with a prescription",
            subcategories=(
                MedicalSubcategory(
                    id="prescribed-gym",
                    label="Gym",
                    irs_reference_tag="prescribed_exercise",
                    description="Prescribed exercise",
                ),
            ),
        ),
    ]


@pytest.fixture
def fixture_store(fixture_categories) -> TaxonomyStore:
    return TaxonomyStore(fixture_categories)


@pytest.fixture
def sample_expense() -> ExpenseRecord:
    """Sample classified expense for testing."""
    return ExpenseRecord(
        id="expense-123",
        date=FinancialDate.from_string("2024-08-15"),
        amount=Money.from_cents(4599),  # $45.99
        category="Dental & Vision",
        subcategory="Dental Care",
        description="Teeth cleaning",
        vendor="Sample Dental Group",
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    monkeypatch.setenv("MEDEXPENSE_ENV", "test")
    monkeypatch.setenv("MEDEXPENSE_DATA_DIR", str(tmp_path / "medexpense_data"))
    monkeypatch.delenv("MEDEXPENSE_MAX_RESULTS", raising=False)
    monkeypatch.delenv("MEDEXPENSE_AGI_RATE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    # Each test loads configuration from its own environment
    monkeypatch.setattr("medexpense.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "taxonomy: Tests for the medical expense taxonomy")
    config.addinivalue_line("markers", "search: Tests for category search and relevance scoring")
    config.addinivalue_line(
        "markers", "classification: Tests for category resolution and prescription disclosure"
    )
    config.addinivalue_line("markers", "deductions: Tests for Schedule A deduction calculations")
