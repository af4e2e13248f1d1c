"""Math backend configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from weather_utils.utils.exceptions import ConfigurationError

DEFAULT_MATH_BACKEND = "numpy"
DEFAULT_TORCH_DEVICE = "cpu"
VALID_MATH_BACKENDS = ("numpy", "torch")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MathConfig:
    """Selection of the library evaluating ``exp`` and ``pow`` in ``float32``.

    Args:
        backend: Math backend identifier (``numpy`` or ``torch``).
        torch_device: Torch device identifier. The ``numpy`` backend is
            CPU-only and therefore requires ``torch_device='cpu'``.
    """

    backend: str = DEFAULT_MATH_BACKEND
    torch_device: str = DEFAULT_TORCH_DEVICE

    def validate(self) -> None:
        """Validate the backend selection.

        Raises:
            weather_utils.utils.exceptions.ConfigurationError: If the backend
                is unknown, the device is inconsistent with the backend, or
                the selected backend is not installed.
        """
        if self.backend not in VALID_MATH_BACKENDS:
            msg = f"backend must be one of {VALID_MATH_BACKENDS}, got: {self.backend!r}"
            raise ConfigurationError(msg)
        if not self.torch_device:
            msg = "torch_device must be a non-empty string"
            raise ConfigurationError(msg)
        if self.backend != "torch" and self.torch_device != DEFAULT_TORCH_DEVICE:
            msg = (
                "torch_device is only meaningful for backend='torch'. "
                "Use torch_device='cpu' for the numpy backend."
            )
            raise ConfigurationError(msg)
        if self.backend == "torch":
            torch = require_torch()
            if self.torch_device.startswith("cuda") and not torch.cuda.is_available():
                msg = (
                    "torch_device requests CUDA but no CUDA device is available: "
                    f"{self.torch_device!r}"
                )
                raise ConfigurationError(msg)


def require_torch() -> Any:
    """Import torch lazily and fail with a configuration-level message.

    Returns:
        Imported ``torch`` module.

    Raises:
        weather_utils.utils.exceptions.ConfigurationError: If torch is not
            installed.
    """
    try:
        import torch
    except ModuleNotFoundError as exc:
        msg = (
            "backend='torch' requires PyTorch. "
            "Install with `pip install -e '.[torch]'` or add `torch` to your environment."
        )
        raise ConfigurationError(msg) from exc
    return torch


def resolve_math_config(config: MathConfig | None) -> MathConfig:
    """Return a validated config, falling back to the NumPy default.

    Args:
        config: Optional caller-supplied configuration.

    Returns:
        Validated math configuration.

    Raises:
        weather_utils.utils.exceptions.ConfigurationError: If ``config`` is
            invalid.
    """
    if config is None:
        return MathConfig()
    config.validate()
    return config


def build_math_config(
    backend: str = DEFAULT_MATH_BACKEND,
    torch_device: str = DEFAULT_TORCH_DEVICE,
) -> MathConfig:
    """Build a validated math backend configuration.

    Args:
        backend: Math backend identifier (``numpy`` or ``torch``).
        torch_device: Torch device identifier, ``cpu`` unless the backend is
            ``torch``.

    Returns:
        Fully validated math configuration.

    Raises:
        weather_utils.utils.exceptions.ConfigurationError: If the selection is
            invalid or the backend is not installed.
    """
    config = MathConfig(backend=backend, torch_device=torch_device)
    config.validate()
    logger.debug("Using %s math backend on %s", config.backend, config.torch_device)
    return config
