"""Named arithmetic helpers over backend tensors and Python scalars."""

from __future__ import annotations

import logging
from numbers import Number, Real
from typing import Any

from .context import OperatorContext, resolve_context
from .errors import UnsupportedTypeError
from .tensor import as_tensor, ensure_float

logger = logging.getLogger(__name__)


def constant(
    value: Any,
    *,
    like: Any = None,
    dtype: Any = None,
    ctx: OperatorContext | None = None,
) -> Any:
    """Create a constant tensor from `value`.

    Args:
        value (Any): A Python scalar or nested sequence.
        like (Any): If given, the constant takes this tensor's dtype.
            Ignored when `dtype` is set. Defaults to None.
        dtype (Any): Explicit dtype. Defaults to None, meaning the dtype of
            `like`, or float32 if `like` is None too.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Returns:
        Any: The constant backend array.
    """
    ctx = resolve_context(ctx)
    if dtype is None:
        dtype = like.dtype if like is not None else ctx.xp.float32
    return ctx.xp.asarray(value, dtype=dtype)


def _is_real_scalar(v: Any) -> bool:
    """Whether `v` is a scalar operand, rejecting non-real scalars.

    Raises:
        UnsupportedTypeError: If `v` is a scalar but not a real number.
    """
    if not isinstance(v, Number):
        return False
    if not isinstance(v, Real):
        raise UnsupportedTypeError(
            f'Unsupported scalar type "{type(v).__name__}", expected a real number'
        )
    return True


def _operands(x: Any, y: Any, ctx: OperatorContext) -> tuple[Any, Any]:
    """Turn scalar operands into constants matching the tensor operand.

    Raises:
        UnsupportedTypeError: If a tensor operand is not floating point,
            or a scalar operand is not a real number.
    """
    x_is_scalar = _is_real_scalar(x)
    y_is_scalar = _is_real_scalar(y)
    if x_is_scalar and y_is_scalar:
        return constant(x, ctx=ctx), constant(y, ctx=ctx)
    if x_is_scalar:
        y = ensure_float(as_tensor(y, ctx=ctx))
        logger.debug(f"Casting scalar {x!r} to {y.dtype}")
        return constant(x, like=y, ctx=ctx), y
    if y_is_scalar:
        x = ensure_float(as_tensor(x, ctx=ctx))
        logger.debug(f"Casting scalar {y!r} to {x.dtype}")
        return x, constant(y, like=x, ctx=ctx)
    return ensure_float(as_tensor(x, ctx=ctx)), ensure_float(as_tensor(y, ctx=ctx))


def add(x: Any, y: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Elementwise `x + y`.

    Args:
        x (Any): Tensor or scalar.
        y (Any): Tensor or scalar.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Returns:
        Any: The sum, broadcast to the common shape.
    """
    ctx = resolve_context(ctx)
    x, y = _operands(x, y, ctx)
    return ctx.xp.add(x, y)


def subtract(x: Any, y: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Elementwise `x - y`.

    Either side may be a scalar, so `subtract(1, x)` computes `1 - x`.

    Args:
        x (Any): Tensor or scalar.
        y (Any): Tensor or scalar.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Returns:
        Any: The difference, broadcast to the common shape.
    """
    ctx = resolve_context(ctx)
    x, y = _operands(x, y, ctx)
    return ctx.xp.subtract(x, y)


def multiply(x: Any, y: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Elementwise `x * y`.

    Args:
        x (Any): Tensor or scalar.
        y (Any): Tensor or scalar.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Returns:
        Any: The product, broadcast to the common shape.
    """
    ctx = resolve_context(ctx)
    x, y = _operands(x, y, ctx)
    return ctx.xp.multiply(x, y)


__all__ = [
    "add",
    "constant",
    "multiply",
    "subtract",
]
