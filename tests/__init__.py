"""
IV Screening Test Suite

Run tests with:
    pytest tests/                    # All tests
    pytest tests/ -m unit            # Only unit tests
    pytest tests/ --cov=iv_screening # With coverage
"""
