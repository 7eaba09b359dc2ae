"""
Test suite for numkit

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/properties/    : Property-based tests (hypothesis) for the precise layer
"""
