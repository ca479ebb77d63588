"""The operator context: which array module executes kernet's math ops.

Every op accepts an explicit ``ctx``. When it is omitted, the process-wide
context registered with `set_operator_context` is used instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from .backend import BACKEND, xp
from .errors import UninitializedContextError

if TYPE_CHECKING:
    from types import TracebackType


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatorContext:
    """The environment in which operations are executed.

    Attributes:
        xp (Any): The array module (numpy or cupy) providing all math ops.
        name (str): Name of the backend, for logging and error messages.
    """

    xp: Any
    name: str

    @classmethod
    def default(cls) -> OperatorContext:
        """Context over the backend selected at import time.

        Returns:
            OperatorContext: A context wrapping `kernet.backend.xp`.
        """
        return cls(xp=xp, name=BACKEND)


_OPERATOR_CONTEXT: OperatorContext | None = None


def set_operator_context(ctx: OperatorContext | None) -> None:
    """Sets the process-wide operator context.

    Args:
        ctx (OperatorContext | None): The new context. `None` unsets it.
    """
    global _OPERATOR_CONTEXT
    _OPERATOR_CONTEXT = ctx
    logger.debug(f"Operator context set to {ctx.name if ctx is not None else None!r}")


def get_operator_context() -> OperatorContext:
    """Gets the process-wide operator context.

    Raises:
        UninitializedContextError: If `set_operator_context` was never called.

    Returns:
        OperatorContext: The current context.
    """
    if _OPERATOR_CONTEXT is None:
        raise UninitializedContextError(
            "No operator context set. Call set_operator_context() first "
            "or pass ctx= explicitly."
        )
    return _OPERATOR_CONTEXT


def resolve_context(ctx: OperatorContext | None) -> OperatorContext:
    """Return `ctx`, or the process-wide context if `ctx` is None."""
    return ctx if ctx is not None else get_operator_context()


class operator_context:  # noqa: N801
    """Context manager that sets the global operator context in the context."""

    def __init__(self, ctx: OperatorContext) -> None:
        self.ctx = ctx

    def __enter__(self) -> Self:
        global _OPERATOR_CONTEXT
        self.prev = _OPERATOR_CONTEXT
        _OPERATOR_CONTEXT = self.ctx
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        global _OPERATOR_CONTEXT
        _OPERATOR_CONTEXT = self.prev


__all__ = [
    "OperatorContext",
    "get_operator_context",
    "operator_context",
    "resolve_context",
    "set_operator_context",
]
