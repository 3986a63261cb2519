"""
Floor implementations the oracle can validate.

Each backend is a ``Callable[[float], float]`` evaluating floor on a single
IEEE-754 double.
"""

import functools
from typing import Callable, Dict, List, Union

import numpy as np

from ..config.settings import FloorBackend
from ..core.exceptions import ConfigurationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

FloorFunction = Callable[[float], float]


def numpy_floor(value: float) -> float:
    """floor() via numpy on float64."""
    # Signaling NaN inputs raise the FP invalid flag; the result is still NaN.
    with np.errstate(invalid="ignore"):
        return float(np.floor(np.float64(value)))


@functools.lru_cache(maxsize=None)
def enable_jax_x64() -> None:
    """Switch jax to 64-bit floats; runs once per process."""
    import jax

    jax.config.update("jax_enable_x64", True)
    logger.debug("Enabled jax 64-bit floats")


def jax_floor(value: float) -> float:
    """floor() via jax.numpy with 64-bit floats enabled."""
    import jax.numpy as jnp

    enable_jax_x64()
    return float(jnp.floor(jnp.asarray(value, dtype=jnp.float64)))


_BACKENDS: Dict[FloorBackend, FloorFunction] = {
    FloorBackend.NUMPY: numpy_floor,
    FloorBackend.JAX: jax_floor,
}


def list_backends() -> List[str]:
    """Names of the available floor backends."""
    return [backend.value for backend in _BACKENDS]


def get_floor_function(backend: Union[str, FloorBackend]) -> FloorFunction:
    """
    Resolve a backend name to its floor function.

    Raises:
        ConfigurationError: If the backend is unknown
    """
    try:
        key = FloorBackend(backend.lower() if isinstance(backend, str) else backend)
    except ValueError:
        raise ConfigurationError(
            config_key="harness.backend",
            value=backend,
            choices=list_backends(),
        ) from None

    if key is FloorBackend.JAX:
        enable_jax_x64()

    logger.debug("Resolved floor backend", backend=key.value)
    return _BACKENDS[key]
