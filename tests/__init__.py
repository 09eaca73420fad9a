"""
Test suite for optional_matchers

Contains:
- tests/unit/          : Unit tests for matchers, factories and wording
"""
