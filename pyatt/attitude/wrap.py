"""
Attitude angle wrapping utilities.

Helpers for bringing angles into canonical ranges. They accept scalars or arrays
and always return float64 arrays, leaving the input untouched. Euler angles follow
the 'roll-pitch-yaw' order used throughout :mod:`pyatt.attitude`.
"""

import numpy as np

from ..core.constants import HALF_PI, TWO_PI


def wrapTo2Pi(v1):
    """
    Wrap angles to [0, 2π] range.

    Positive multiples of 2π map to 2π rather than 0.

    Parameters
    ----------
    v1 : float or array_like
        Angles in radians

    Returns
    -------
    v2 : ndarray
        Angles in radians within [0, 2π]
    """
    v1 = np.asarray(v1, dtype=np.float64)
    positive = v1 > 0
    v2 = np.mod(v1, TWO_PI)
    return np.where((v2 == 0) & positive, TWO_PI, v2)


def wrapToPi(v1):
    """
    Wrap angles to [-π, π] range.

    Parameters
    ----------
    v1 : float or array_like
        Angles in radians

    Returns
    -------
    v2 : ndarray
        Angles in radians within [-π, π]
    """
    v1 = np.asarray(v1, dtype=np.float64)
    outside = (v1 < -np.pi) | (np.pi < v1)
    return np.where(outside, wrapTo2Pi(v1 + np.pi) - np.pi, v1)


def wrapEulerAngles(e):
    """
    Wrap euler angles to their principal ranges.

    Pitch is folded into [-π/2, π/2]; when that takes a flip, π is added to
    roll and yaw so the angles still describe the same rotation. Roll and yaw
    end up in [-π, π]. This is the range :func:`pyatt.attitude.dcm.dcm2euler`
    returns away from gimbal lock.

    Parameters
    ----------
    e : array_like, shape (3,)
        Euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    e2 : ndarray, shape (3,)
        Wrapped euler angles [roll, pitch, yaw] in radians
    """
    e2 = np.array(e, dtype=np.float64)
    if e2.shape != (3,):
        raise ValueError(f"euler angles must have shape (3,), got {e2.shape}")

    pitch = float(wrapToPi(e2[1]))
    if pitch > HALF_PI:
        e2[1] = np.pi - pitch
        e2[0] += np.pi
        e2[2] += np.pi
    elif pitch < -HALF_PI:
        e2[1] = -np.pi - pitch
        e2[0] += np.pi
        e2[2] += np.pi
    else:
        e2[1] = pitch

    e2[0] = wrapToPi(e2[0])
    e2[2] = wrapToPi(e2[2])
    return e2
