"""
Test suite for checkdigit

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/unit/util/     : Shared test harnesses
"""
