"""Integrations subpackage for object-diff.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_no_diff`` fixture.
"""
