"""Backend selection for all ops in kernet.

The backend is chosen once at import time. Set ``KERNET_BACKEND`` to
``numpy``, ``cupy`` or ``auto`` (default) to control the choice.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

logger = logging.getLogger(__name__)


BackendName = Literal["numpy", "cupy"]

_BACKEND_ENV_VAR = "KERNET_BACKEND"
_BACKEND_CHOICES = ("auto", "numpy", "cupy")


def _requested_backend() -> str:
    """Read the requested backend from the environment.

    Raises:
        ValueError: If the variable holds an unknown backend name.

    Returns:
        str: One of "auto", "numpy" or "cupy".
    """
    requested = os.environ.get(_BACKEND_ENV_VAR, "auto").strip().lower()
    if requested not in _BACKEND_CHOICES:
        raise ValueError(
            f'Unknown backend "{requested}" in {_BACKEND_ENV_VAR}, '
            f"expected one of {_BACKEND_CHOICES}"
        )
    return requested


def _validate_cupy_available() -> None:
    """Validate that CuPy is available with working CUDA devices.

    Raises:
        RuntimeError: If CUDA is unavailable or no devices are found.
    """
    try:
        _device_count = xp.cuda.runtime.getDeviceCount()
    except Exception as exc:
        raise RuntimeError("Cupy is installed but CUDA is unavailable") from exc

    if _device_count < 1:
        raise RuntimeError("Cupy is installed but no CUDA devices are available")


_REQUESTED = _requested_backend()

if _REQUESTED == "numpy":
    import numpy as xp

    BACKEND: BackendName = "numpy"
    logger.debug("Using numpy as backend (requested via %s)", _BACKEND_ENV_VAR)
else:
    try:
        import cupy as xp

        _validate_cupy_available()

        BACKEND = "cupy"
        logger.debug("Using cupy as backend")
    except (ImportError, RuntimeError) as err:
        if _REQUESTED == "cupy":
            raise RuntimeError(
                f'{_BACKEND_ENV_VAR}="cupy" but cupy cannot be used: {err}'
            ) from err

        import numpy as xp

        BACKEND = "numpy"
        logger.warning("Cupy backend unavailable; falling back to numpy (cpu)")
        logger.debug(f"Falling back to numpy because: {err!r}")


__all__ = [
    "BACKEND",
    "BackendName",
    "xp",
]
