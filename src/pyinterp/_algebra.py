"""Shared helpers for Polynomial arithmetic operators."""

from __future__ import annotations

import numpy as np


def _is_scalar(value) -> bool:
    """Return True if *value* is a real numeric scalar (int, float, or numpy scalar)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _as_coefficients(coefficients) -> np.ndarray:
    """Validate and copy *coefficients* into a 1-D float array.

    An empty sequence yields the zero polynomial ``[0.0]``.

    Raises
    ------
    ValueError
        If the input is not one-dimensional or contains NaN or Inf.
    """
    data = np.array(coefficients, dtype=float)
    if data.ndim == 0:
        data = data.reshape(1)
    if data.ndim != 1:
        raise ValueError(
            f"coefficients must be one-dimensional, got shape {data.shape}"
        )
    if data.size == 0:
        return np.zeros(1)
    if not np.isfinite(data).all():
        raise ValueError("coefficients contain NaN or Inf")
    return data


def _padded_sum(longer: np.ndarray, shorter: np.ndarray) -> np.ndarray:
    """Add *shorter* into a copy of *longer*, keeping high-order entries of *longer*."""
    result = longer.copy()
    result[: len(shorter)] += shorter
    return result
