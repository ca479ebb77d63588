"""Creating tensors and checking their element types."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from .context import OperatorContext, resolve_context
from .errors import UnsupportedTypeError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def tensor(
    data: Any,
    *,
    dtype: Any = None,
    ctx: OperatorContext | None = None,
) -> Any:
    """Factory function to create a floating point tensor.

    Args:
        data (Any): The array data (can be scalar, list, array, etc).
        dtype (Any): The data type of the array data. Defaults to None,
            meaning float32 unless `data` already is a floating point array.
        ctx (OperatorContext | None): The context creating the tensor.
            Defaults to the process-wide context.

    Raises:
        UnsupportedTypeError: If `dtype` is not a floating point type.

    Returns:
        Any: The created backend array.
    """
    ctx = resolve_context(ctx)
    if dtype is None and not _is_floating(data):
        dtype = ctx.xp.float32
        logger.debug("tensor: no floating point dtype given, using float32")
    result = ctx.xp.array(data, dtype=dtype)
    return ensure_float(result)


def as_tensor(x: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Convert `x` to a backend array without copying if it already is one.

    Unlike `tensor`, the element type is kept as is: Python ints and int
    sequences become integer arrays, which the activation functions reject.

    Args:
        x (Any): A backend array, a Python scalar or a nested sequence.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Returns:
        Any: The backend array.
    """
    ctx = resolve_context(ctx)
    if isinstance(x, ctx.xp.ndarray):
        return x
    return ctx.xp.asarray(x)


def ensure_float(x: Any) -> Any:
    """Check that `x` holds floating point elements.

    Args:
        x (Any): The backend array to check.

    Raises:
        UnsupportedTypeError: If the element type of `x` is not floating point.

    Returns:
        Any: `x`, unchanged.
    """
    if not np.issubdtype(x.dtype, np.floating):
        raise UnsupportedTypeError(
            f'Unsupported element type "{x.dtype}", expected a floating point type'
        )
    return x


def scalars(x: Any) -> Iterator[tuple[tuple[int, ...], float]]:
    """Iterate over all elements of `x` together with their index.

    Args:
        x (Any): A backend array. Cupy arrays are copied to the host first.

    Yields:
        tuple[tuple[int, ...], float]: The index and the element value.
    """
    host = x.get() if hasattr(x, "get") else x
    for index in np.ndindex(host.shape):
        yield index, float(host[index])


def _is_floating(data: Any) -> bool:
    dtype = getattr(data, "dtype", None)
    return dtype is not None and bool(np.issubdtype(dtype, np.floating))


__all__ = [
    "as_tensor",
    "ensure_float",
    "scalars",
    "tensor",
]
