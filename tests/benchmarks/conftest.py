"""Deterministic record generators for performance benchmarks.

All generators produce fixed, reproducible records. No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested.
Each tier provides both an "equal" pair (separate but identical objects,
with coercible type drift) and a "changed" pair.
"""

from __future__ import annotations

from typing import Any

import pytest


def _flat_pair(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Flat pair where every numeric value drifts to a string."""
    left = {f"field_{i}": i for i in range(num_keys)}
    right = {f"field_{i}": str(i) for i in range(num_keys)}
    return left, right


def _nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """10 sections x (9 leaf keys each), one array per section."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        left[f"section_{i}"] = {f"field_{i}_{j}": j for j in range(8)}
        right[f"section_{i}"] = {f"field_{i}_{j}": j for j in range(8)}
        left[f"section_{i}"]["tags"] = [f"t{j}" for j in range(5)]
        right[f"section_{i}"]["tags"] = [f"t{j}" for j in reversed(range(5))]
    return left, right


def _nested_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """5 sections x 5 groups x (14 leaf keys + an array of records)."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(5):
        mid_l: dict[str, Any] = {}
        mid_r: dict[str, Any] = {}
        for j in range(5):
            leaf_l: dict[str, Any] = {f"k_{k}": f"v_{i}_{j}_{k}" for k in range(14)}
            leaf_r: dict[str, Any] = {f"k_{k}": f"v_{i}_{j}_{k}" for k in range(14)}
            leaf_l["rows"] = [{"id": k, "ok": True} for k in range(6)]
            leaf_r["rows"] = [{"id": str(k), "ok": "true"} for k in range(6)]
            mid_l[f"group_{j}"] = leaf_l
            mid_r[f"group_{j}"] = leaf_r
        left[f"section_{i}"] = mid_l
        right[f"section_{i}"] = mid_r
    return left, right


def _changed(pair: tuple[dict[str, Any], dict[str, Any]]) -> tuple[dict[str, Any], dict[str, Any]]:
    left, right = pair
    right = dict(right)
    first = next(iter(right))
    right.pop(first)
    right["added_field"] = {"x": 1}
    return left, right


@pytest.fixture
def pair_10key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return _flat_pair(10)


@pytest.fixture
def pair_10key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed(_flat_pair(10))


@pytest.fixture
def pair_100key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_100()


@pytest.fixture
def pair_100key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed(_nested_100())


@pytest.fixture
def pair_500key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_500()


@pytest.fixture
def pair_500key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed(_nested_500())
