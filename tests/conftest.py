"""Shared fixtures for the kernet tests."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest
from kernet import OperatorContext, set_operator_context


@pytest.fixture
def ctx() -> OperatorContext:
    """The context over the backend selected at import time."""
    return OperatorContext.default()


@pytest.fixture(autouse=True)
def _reset_operator_context() -> Iterator[None]:
    """Leave the process-wide context unset before and after every test."""
    set_operator_context(None)
    yield
    set_operator_context(None)


@pytest.fixture
def global_ctx(ctx: OperatorContext) -> OperatorContext:
    """Register `ctx` as the process-wide context."""
    set_operator_context(ctx)
    return ctx


def random_input(
    rng: np.random.Generator,
    *,
    lo: float = -10.0,
    hi: float = 10.0,
    dtype: type = np.float64,
) -> np.ndarray:
    """Random tensor with 1 to 4 dimensions, each of size 1 to 9.

    Args:
        rng (np.random.Generator): Random number generator.
        lo (float): Lower bound of the values.
        hi (float): Upper bound of the values.
        dtype (type): Element type.

    Returns:
        np.ndarray: The random array.
    """
    shape = tuple(int(s) for s in rng.integers(1, 10, size=rng.integers(1, 5)))
    return rng.uniform(lo, hi, shape).astype(dtype)


def to_numpy(x: object) -> np.ndarray:
    """Copy a backend array to the host (no-op for numpy arrays)."""
    return x.get() if hasattr(x, "get") else np.asarray(x)  # type: ignore[attr-defined]
