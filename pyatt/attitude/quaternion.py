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
Attitude conversion from quaternions.

This module provides functions for converting from quaternions to other attitude
representations. Quaternions are ordered [w, x, y, z] with the scalar part first;
the null rotation is [1, 0, 0, 0]. Euler angles are 'roll-pitch-yaw' and DCMs are
built in the 'ZYX' sequence.

No normalization is performed: a non-unit quaternion gives a non-orthonormal DCM.
"""

import numpy as np
from numba import njit

from ._array import as_quat
from .dcm import _dcm2euler


@njit(cache=True)
def _quat2dcm(q):
    w = np.float64(q[0])
    x = np.float64(q[1])
    y = np.float64(q[2])
    z = np.float64(q[3])
    ww, xx, yy, zz = w * w, x * x, y * y, z * z

    C = np.empty((3, 3), dtype=np.float32)
    C[0, 0] = ww + xx - yy - zz
    C[0, 1] = 2.0 * (x * y - w * z)
    C[0, 2] = 2.0 * (w * y + x * z)
    C[1, 0] = 2.0 * (x * y + w * z)
    C[1, 1] = ww - xx + yy - zz
    C[1, 2] = 2.0 * (y * z - w * x)
    C[2, 0] = 2.0 * (x * z - w * y)
    C[2, 1] = 2.0 * (w * x + y * z)
    C[2, 2] = ww - xx - yy + zz
    return C


def quat2dcm(q):
    """
    Convert quaternion to corresponding 'ZYX' DCM.

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3), float32
        Direction cosine matrix, indexed [row, col]

    Raises
    ------
    ValueError
        If `q` does not have shape (4,)
    """
    return _quat2dcm(as_quat(q))


def quat2euler(q):
    """
    Convert quaternion to corresponding euler angles (roll-pitch-yaw).

    Goes through the DCM, so ``quat2euler(q)`` is identical to
    ``dcm2euler(quat2dcm(q))``, including the gimbal lock handling.

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    e : ndarray, shape (3,), float32
        RPY euler angles [roll, pitch, yaw] in radians
    """
    return _dcm2euler(_quat2dcm(as_quat(q)))


def canonical_quat(q):
    """Return `q` or `-q`, whichever has a non-negative scalar part."""
    q = as_quat(q)
    if q[0] < 0.0:
        q = -q
    return q
