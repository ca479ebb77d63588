"""Activation functions. Each one is an immutable, elementwise mathematical mapping.

Softmax is the exception to "elementwise": it normalizes along an axis.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from .context import OperatorContext, resolve_context
from .errors import InvalidShapeError, UnsupportedActivationError
from .tensor import as_tensor, ensure_float

if TYPE_CHECKING:
    from collections.abc import Callable

A = TypeVar("A", bound="ActivationFunction")

logger = logging.getLogger(__name__)


class ActivationKind(str, Enum):
    """The available activation functions."""

    SIGMOID = "sigmoid"
    RELU = "relu"
    TANH = "tanh"
    SOFTMAX = "softmax"
    SWISH = "swish"


# Maps each kind to the class implementing it
_ACTIVATION_REGISTRY: dict[ActivationKind, type[ActivationFunction]] = {}


def register_activation(kind: ActivationKind) -> Callable[[type[A]], type[A]]:
    """Decorator factory to register an activation function class under `kind`.

    Args:
        kind (ActivationKind): The kind the class implements.

    Returns:
        Callable[[type[A]], type[A]]: Decorator that registers the class.
    """

    def decorator(cls: type[A]) -> type[A]:
        cls.kind = kind
        _ACTIVATION_REGISTRY[kind] = cls
        return cls

    return decorator


def normalize_activation_kind(kind: ActivationKind | str) -> ActivationKind:
    """Resolve an activation name (case-insensitive) to its `ActivationKind`.

    Args:
        kind (ActivationKind | str): The kind, or its name, e.g. "ReLU".

    Raises:
        UnsupportedActivationError: If no activation has that name.

    Returns:
        ActivationKind: The matching kind.

    Examples:
        >>> normalize_activation_kind("ReLU")
        <ActivationKind.RELU: 'relu'>
    """
    if isinstance(kind, ActivationKind):
        return kind
    if isinstance(kind, str):
        try:
            return ActivationKind(kind.strip().lower())
        except ValueError:
            pass
    raise UnsupportedActivationError(
        f'Unknown activation "{kind}", expected one of '
        f"{[k.value for k in ActivationKind]}"
    )


@dataclass(frozen=True, kw_only=True)
class ActivationFunction(ABC):
    """Abstract Base Class (ABC) for all activation functions.

    Instances are frozen: to change a parameter, build a new instance.

    Attributes:
        ctx (OperatorContext | None): The context executing the math ops.
            Defaults to None, meaning the process-wide context at call time.
    """

    kind: ClassVar[ActivationKind]

    ctx: OperatorContext | None = None

    def __call__(self, x: Any) -> Any:
        """Forward pass, applies the activation function to `x`.

        Args:
            x (Any): Input tensor (or scalar/sequence convertible to one).

        Raises:
            UnsupportedTypeError: If `x` does not hold floating point values.

        Returns:
            Any: A new tensor, `x` is not modified.
        """
        ctx = resolve_context(self.ctx)
        x = ensure_float(as_tensor(x, ctx=ctx))
        return self._forward(ctx.xp, x)

    def derivative(self, x: Any) -> Any:
        """Elementwise derivative of the activation function at `x`.

        Args:
            x (Any): Input tensor (or scalar/sequence convertible to one).

        Raises:
            UnsupportedTypeError: If `x` does not hold floating point values.

        Returns:
            Any: A tensor with the same shape as `x`.
        """
        ctx = resolve_context(self.ctx)
        x = ensure_float(as_tensor(x, ctx=ctx))
        return self._derivative(ctx.xp, x)

    @abstractmethod
    def _forward(self, xp: Any, x: Any) -> Any:
        """Compute the activation on a validated floating point tensor."""

    @abstractmethod
    def _derivative(self, xp: Any, x: Any) -> Any:
        """Compute the derivative on a validated floating point tensor."""


def _sigmoid(xp: Any, x: Any) -> Any:
    # exp(-|x|) never overflows, both branches equal 1 / (1 + exp(-x))
    z = xp.exp(-xp.abs(x))
    return xp.where(x >= 0, 1 / (1 + z), z / (1 + z))


@register_activation(ActivationKind.SIGMOID)
@dataclass(frozen=True, kw_only=True)
class Sigmoid(ActivationFunction):
    """Sigmoid activation function, `1 / (1 + exp(-x))`."""

    def _forward(self, xp: Any, x: Any) -> Any:
        return _sigmoid(xp, x)

    def _derivative(self, xp: Any, x: Any) -> Any:
        s = _sigmoid(xp, x)
        return s * (1 - s)


@register_activation(ActivationKind.RELU)
@dataclass(frozen=True, kw_only=True)
class ReLU(ActivationFunction):
    """ReLU activation function, `max(0, x)`."""

    def _forward(self, xp: Any, x: Any) -> Any:
        return xp.maximum(x, 0)

    def _derivative(self, xp: Any, x: Any) -> Any:
        return (x > 0).astype(x.dtype)


@register_activation(ActivationKind.TANH)
@dataclass(frozen=True, kw_only=True)
class Tanh(ActivationFunction):
    """Hyperbolic tangent activation function."""

    def _forward(self, xp: Any, x: Any) -> Any:
        return xp.tanh(x)

    def _derivative(self, xp: Any, x: Any) -> Any:
        return 1 - xp.tanh(x) ** 2


@register_activation(ActivationKind.SOFTMAX)
@dataclass(frozen=True)
class Softmax(ActivationFunction):
    """Softmax activation function, normalizes `x` along `axis`.

    Attributes:
        axis (int): The axis to normalize along. Defaults to -1 (last axis).
    """

    axis: int = -1

    def _check_axis(self, x: Any) -> None:
        """Validate that `x` has a non-empty axis `self.axis`.

        Raises:
            InvalidShapeError: If `x` is 0-d, `axis` is out of range,
                or the axis has length zero.
        """
        if x.ndim == 0:
            raise InvalidShapeError("Softmax needs at least one dimension, got a 0-d tensor")
        if not -x.ndim <= self.axis < x.ndim:
            raise InvalidShapeError(
                f"Softmax axis {self.axis} is out of range for a tensor with shape {x.shape}"
            )
        if x.shape[self.axis] == 0:
            raise InvalidShapeError(
                f"Softmax axis {self.axis} has length zero (shape {x.shape})"
            )

    def _forward(self, xp: Any, x: Any) -> Any:
        self._check_axis(x)
        x = x - x.max(axis=self.axis, keepdims=True)  # for numerical stability
        x = xp.exp(x)
        return x / x.sum(axis=self.axis, keepdims=True)

    def _derivative(self, xp: Any, x: Any) -> Any:
        # diagonal of the softmax jacobian
        p = self._forward(xp, x)
        return p * (1 - p)


@register_activation(ActivationKind.SWISH)
@dataclass(frozen=True)
class Swish(ActivationFunction):
    """Swish activation function, `x * sigmoid(beta * x)`.

    Attributes:
        beta (float): The coefficient scaling the sigmoid input. Defaults to 1.0.
    """

    beta: float = 1.0

    def __post_init__(self) -> None:
        """Validate `beta` and store it as a Python float.

        Raises:
            TypeError: If `beta` is not a real number.
        """
        if isinstance(self.beta, bool) or not isinstance(self.beta, Real):
            raise TypeError(f"beta must be a real number, found {type(self.beta).__name__}")
        # numpy scalars would otherwise promote float32 inputs
        object.__setattr__(self, "beta", float(self.beta))

    def with_beta(self, beta: float) -> Swish:
        """Copy of this activation with a different `beta`.

        Args:
            beta (float): The new coefficient.

        Returns:
            Swish: A new instance, `self` is unchanged.
        """
        return replace(self, beta=beta)

    def _forward(self, xp: Any, x: Any) -> Any:
        return x * _sigmoid(xp, self.beta * x)

    def _derivative(self, xp: Any, x: Any) -> Any:
        s = _sigmoid(xp, self.beta * x)
        return s + self.beta * x * s * (1 - s)


def get_activation(kind: ActivationKind | str, **params: Any) -> ActivationFunction:
    """Build the activation function registered under `kind`.

    Args:
        kind (ActivationKind | str): The kind, or its name.
        **params (Any): Constructor arguments, e.g. `beta` for Swish,
            `axis` for Softmax, `ctx` for all.

    Raises:
        UnsupportedActivationError: If no activation is registered for `kind`.

    Returns:
        ActivationFunction: The new instance.
    """
    normalized = normalize_activation_kind(kind)
    cls = _ACTIVATION_REGISTRY.get(normalized)
    if cls is None:
        raise UnsupportedActivationError(f'No activation registered for "{normalized.value}"')
    return cls(**params)


def evaluate(
    kind: ActivationKind | str,
    x: Any,
    *,
    beta: float = 1.0,
    axis: int = -1,
    ctx: OperatorContext | None = None,
) -> Any:
    """Apply the activation function `kind` to `x`.

    Args:
        kind (ActivationKind | str): The kind, or its name.
        x (Any): Input tensor.
        beta (float): Coefficient for Swish, ignored otherwise. Defaults to 1.0.
        axis (int): Normalization axis for Softmax, ignored otherwise.
            Defaults to -1.
        ctx (OperatorContext | None): Defaults to the process-wide context.

    Raises:
        UnsupportedActivationError: If `kind` names no activation.
        UnsupportedTypeError: If `x` does not hold floating point values.
        InvalidShapeError: For Softmax over a missing or empty axis.

    Returns:
        Any: The transformed tensor.
    """
    normalized = normalize_activation_kind(kind)
    params: dict[str, Any] = {"ctx": ctx}
    if normalized is ActivationKind.SWISH:
        params["beta"] = beta
    elif normalized is ActivationKind.SOFTMAX:
        params["axis"] = axis

    logger.debug(
        'evaluate: kind="%s" shape="%s" params="%s"',
        normalized.value,
        getattr(x, "shape", ()),
        params,
    )
    return get_activation(normalized, **params)(x)


def sigmoid(x: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Functional form of `Sigmoid`."""
    return Sigmoid(ctx=ctx)(x)


def relu(x: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Functional form of `ReLU`."""
    return ReLU(ctx=ctx)(x)


def tanh(x: Any, *, ctx: OperatorContext | None = None) -> Any:
    """Functional form of `Tanh`."""
    return Tanh(ctx=ctx)(x)


def softmax(x: Any, *, axis: int = -1, ctx: OperatorContext | None = None) -> Any:
    """Functional form of `Softmax`."""
    return Softmax(axis=axis, ctx=ctx)(x)


def swish(x: Any, *, beta: float = 1.0, ctx: OperatorContext | None = None) -> Any:
    """Functional form of `Swish`."""
    return Swish(beta=beta, ctx=ctx)(x)


__all__ = [
    "ActivationFunction",
    "ActivationKind",
    "ReLU",
    "Sigmoid",
    "Softmax",
    "Swish",
    "Tanh",
    "evaluate",
    "get_activation",
    "normalize_activation_kind",
    "register_activation",
    "relu",
    "sigmoid",
    "softmax",
    "swish",
    "tanh",
]
