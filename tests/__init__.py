"""StudyPulse Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - learning/: energy tracker, patterns, windows, persona, metrics, insights
  - suggestions/: suggestion rules, models, and the suggestion queue
  - context/: context provider, activity monitor, periodic poller
  - test_config_models.py, test_logging_config.py, test_cli.py

Running tests:
    # All tests
    pytest

    # Specific package
    pytest tests/unit/learning/

    # With coverage
    pytest --cov=studypulse --cov-report=term-missing
"""
