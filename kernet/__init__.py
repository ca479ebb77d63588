"""kernet: activation functions and arithmetic helpers on NumPy/CuPy tensors."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kernet")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for uninstalled package
from .activation import (
    ActivationFunction,
    ActivationKind,
    ReLU,
    Sigmoid,
    Softmax,
    Swish,
    Tanh,
    evaluate,
    get_activation,
    normalize_activation_kind,
    register_activation,
    relu,
    sigmoid,
    softmax,
    swish,
    tanh,
)
from .backend import (
    BACKEND,
    xp,
)
from .context import (
    OperatorContext,
    get_operator_context,
    operator_context,
    set_operator_context,
)
from .errors import (
    InvalidShapeError,
    KernetError,
    UninitializedContextError,
    UnsupportedActivationError,
    UnsupportedTypeError,
)
from .math import (
    add,
    constant,
    multiply,
    subtract,
)
from .tensor import (
    as_tensor,
    ensure_float,
    scalars,
    tensor,
)

__all__ = [
    "BACKEND",
    "ActivationFunction",
    "ActivationKind",
    "InvalidShapeError",
    "KernetError",
    "OperatorContext",
    "ReLU",
    "Sigmoid",
    "Softmax",
    "Swish",
    "Tanh",
    "UninitializedContextError",
    "UnsupportedActivationError",
    "UnsupportedTypeError",
    "__version__",
    "add",
    "as_tensor",
    "constant",
    "ensure_float",
    "evaluate",
    "get_activation",
    "get_operator_context",
    "multiply",
    "normalize_activation_kind",
    "operator_context",
    "register_activation",
    "relu",
    "scalars",
    "set_operator_context",
    "sigmoid",
    "softmax",
    "subtract",
    "swish",
    "tanh",
    "tensor",
    "xp",
]
