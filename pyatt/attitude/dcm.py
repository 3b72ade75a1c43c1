# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Attitude conversion from direction cosine matrices.

This module provides functions for converting from Direction Cosine Matrices (DCM) to
other attitude representations. All rotations assume right-hand coordinate frames with
euler angles in the order 'roll-pitch-yaw' and DCMs built in the 'ZYX' sequence.

The input matrix is assumed orthonormal and is not checked. Malformed matrices give
degenerate numbers (NaN from ``arcsin``/``sqrt`` of out-of-range arguments) rather
than errors; see :mod:`pyatt.attitude.checks` for opt-in validation.

References:
    S. W. Shepperd, "Quaternion from Rotation Matrix", Journal of Guidance and
    Control, Vol. 1, No. 3 (1978)
"""

import numpy as np
from numba import njit

from ..core.constants import GIMBAL_LOCK_THRESHOLD, HALF_PI
from ._array import as_dcm


@njit(cache=True)
def _dcm2euler(C):
    theta = np.arcsin(-np.float64(C[2, 0]))

    if np.abs(theta - HALF_PI) < GIMBAL_LOCK_THRESHOLD:
        # roll and yaw are coupled, only yaw - roll is observable
        phi = 0.0
        psi = np.arctan2(np.float64(C[1, 2]) - np.float64(C[0, 1]),
                         np.float64(C[0, 2]) + np.float64(C[1, 1]))
    elif np.abs(theta + HALF_PI) < GIMBAL_LOCK_THRESHOLD:
        # only yaw + roll is observable
        phi = 0.0
        psi = np.arctan2(-(np.float64(C[1, 2]) + np.float64(C[0, 1])),
                         np.float64(C[1, 1]) - np.float64(C[0, 2]))
    else:
        phi = np.arctan2(np.float64(C[2, 1]), np.float64(C[2, 2]))
        psi = np.arctan2(np.float64(C[1, 0]), np.float64(C[0, 0]))

    e = np.empty(3, dtype=np.float32)
    e[0] = phi
    e[1] = theta
    e[2] = psi
    return e


@njit(cache=True)
def _dcm2quat(C):
    M = C.astype(np.float64)
    q = np.empty(4, dtype=np.float32)

    tr = M[0, 0] + M[1, 1] + M[2, 2]
    if tr > 0.0:
        s = np.sqrt(tr + 1.0)
        q[0] = s * 0.5
        s = 0.5 / s
        q[1] = (M[2, 1] - M[1, 2]) * s
        q[2] = (M[0, 2] - M[2, 0]) * s
        q[3] = (M[1, 0] - M[0, 1]) * s
    else:
        # largest diagonal element keeps the root argument away from zero
        i = 0
        for n in range(1, 3):
            if M[n, n] > M[i, i]:
                i = n
        j = (i + 1) % 3
        k = (i + 2) % 3

        s = np.sqrt(M[i, i] - M[j, j] - M[k, k] + 1.0)
        q[i + 1] = s * 0.5
        s = 0.5 / s
        q[j + 1] = (M[i, j] + M[j, i]) * s
        q[k + 1] = (M[k, i] + M[i, k]) * s
        q[0] = (M[k, j] - M[j, k]) * s
    return q


def dcm2euler(C):
    """
    Convert 'ZYX' DCM matrix into corresponding euler angles (roll-pitch-yaw).

    Pitch is recovered as ``arcsin(-C[2, 0])`` and therefore lies in
    [-π/2, π/2]. When pitch is within ``GIMBAL_LOCK_THRESHOLD`` of ±π/2 roll
    and yaw are no longer separable; roll is then fixed to zero and the whole
    observable rotation about the vertical is assigned to yaw.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Direction cosine matrix, indexed [row, col]

    Returns
    -------
    e : ndarray, shape (3,), float32
        Euler angles [roll, pitch, yaw] in radians

    Raises
    ------
    ValueError
        If `C` does not have shape (3, 3)
    """
    return _dcm2euler(as_dcm(C))


def dcm2quat(C):
    """
    Convert DCM matrix into corresponding quaternion using Shepperd's method.

    If the trace is positive the scalar part is extracted first. Otherwise the
    vector component belonging to the largest diagonal element is extracted
    first, so the square root argument never becomes small or negative for a
    proper rotation matrix.

    The sign of the result is not canonicalized: ``q`` and ``-q`` describe the
    same rotation. Use :func:`pyatt.attitude.quaternion.canonical_quat` if a
    unique sign is needed.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Direction cosine matrix, indexed [row, col]

    Returns
    -------
    q : ndarray, shape (4,), float32
        Quaternion [w, x, y, z]

    Raises
    ------
    ValueError
        If `C` does not have shape (3, 3)
    """
    return _dcm2quat(as_dcm(C))
