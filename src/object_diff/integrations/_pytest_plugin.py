"""Record-comparison fixture for test suites that use object-diff.

Registered through the ``object_diff`` pytest11 entry point, so any project
with object-diff installed can request ``assert_no_diff`` without a conftest
import.  Failures print the additions, deletions and updates found between
the expected and actual values.
"""

from __future__ import annotations

import pprint
from collections.abc import Mapping
from typing import Any

import pytest

from object_diff import DiffOptions, diff


@pytest.fixture(scope="session")
def assert_no_diff() -> Any:
    """Fixture that returns a callable record-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh DiffEngine per call).

    Usage in tests::

        def test_round_trip(assert_no_diff):
            assert_no_diff(load_record(), {"age": "30"}, ignore_properties=["_id"])

        def test_changed(assert_no_diff):
            with pytest.raises(AssertionError, match=r"updates"):
                assert_no_diff({"age": 30}, {"age": 31})

    Returns:
        A callable ``_assert(actual, expected, options=None, **overrides) -> None``
        that raises ``AssertionError`` when the two values differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: DiffOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        """Assert that two values have no structural differences.

        Args:
            actual:    The value produced by the code under test.
            expected:  The expected/reference value.
            options:   Optional DiffOptions or mapping of option overrides.
            overrides: Keyword option overrides.

        Raises:
            AssertionError: When additions, deletions or updates are found,
                with a message listing all three.
        """
        result = diff(expected, actual, options, **overrides)
        if result.has_changes:
            raise AssertionError(
                "values differ:\n"
                f"  additions: {pprint.pformat(result.additions)}\n"
                f"  deletions: {pprint.pformat(result.deletions)}\n"
                f"  updates:   {pprint.pformat(result.updates)}"
            )

    return _assert
