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
Attitude conversion from euler angles.

This module provides functions for converting from euler angles to other attitude
representations. All rotations assume right-hand coordinate frames with euler angles
in the order 'roll-pitch-yaw' and DCMs built in the 'ZYX' sequence, i.e.
``C = Rz(yaw) @ Ry(pitch) @ Rx(roll)``.

Angles cross the public interface in single precision; the trigonometric terms and
their products are evaluated in double precision before the result is rounded back.

References:
    NASA Mission Planning and Analysis Division, "Euler Angles, Quaternions, and
    Transformation Matrices" (1977)
"""

import numpy as np
from numba import njit

from ._array import as_euler


@njit(cache=True)
def _euler2dcm(e):
    roll = np.float64(e[0])
    pitch = np.float64(e[1])
    yaw = np.float64(e[2])
    cosP, sinP = np.cos(roll), np.sin(roll)
    cosT, sinT = np.cos(pitch), np.sin(pitch)
    cosS, sinS = np.cos(yaw), np.sin(yaw)

    C = np.empty((3, 3), dtype=np.float32)
    C[0, 0] = cosT * cosS
    C[0, 1] = -cosP * sinS + sinP * sinT * cosS
    C[0, 2] = sinP * sinS + cosP * sinT * cosS

    C[1, 0] = cosT * sinS
    C[1, 1] = cosP * cosS + sinP * sinT * sinS
    C[1, 2] = -sinP * cosS + cosP * sinT * sinS

    C[2, 0] = -sinT
    C[2, 1] = sinP * cosT
    C[2, 2] = cosP * cosT
    return C


@njit(cache=True)
def _euler2quat(e):
    # half angles
    roll = np.float64(e[0]) * 0.5
    pitch = np.float64(e[1]) * 0.5
    yaw = np.float64(e[2]) * 0.5
    cosX, sinX = np.cos(roll), np.sin(roll)
    cosY, sinY = np.cos(pitch), np.sin(pitch)
    cosZ, sinZ = np.cos(yaw), np.sin(yaw)

    q = np.empty(4, dtype=np.float32)
    q[0] = cosX * cosY * cosZ + sinX * sinY * sinZ
    q[1] = sinX * cosY * cosZ - cosX * sinY * sinZ
    q[2] = cosX * sinY * cosZ + sinX * cosY * sinZ
    q[3] = cosX * cosY * sinZ - sinX * sinY * cosZ
    return q


def euler2dcm(e):
    """
    Convert euler angles (roll-pitch-yaw) to corresponding 'ZYX' DCM.

    The rotation sequence is:
    1. Yaw (ψ) about z-axis
    2. Pitch (θ) about y-axis
    3. Roll (φ) about x-axis

    Parameters
    ----------
    e : array_like, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians, any range

    Returns
    -------
    C : ndarray, shape (3, 3), float32
        Direction cosine matrix, indexed [row, col]

    Raises
    ------
    ValueError
        If `e` does not have shape (3,)
    """
    return _euler2dcm(as_euler(e))


def euler2quat(e):
    """
    Convert euler angles (roll-pitch-yaw) to corresponding quaternion.

    The quaternion is computed using the half-angle product formulas for the
    ZYX rotation sequence. No renormalization is applied; the result has unit
    norm to within rounding.

    Parameters
    ----------
    e : array_like, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians, any range

    Returns
    -------
    q : ndarray, shape (4,), float32
        Quaternion [w, x, y, z]

    Raises
    ------
    ValueError
        If `e` does not have shape (3,)
    """
    return _euler2quat(as_euler(e))


@njit(cache=True)
def rot_x(phi):
    """
    Convert single euler angle to corresponding 'X' DCM.

    Parameters
    ----------
    phi : float
        Euler angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for x-axis rotation
    """
    sinP = np.sin(phi)
    cosP = np.cos(phi)
    R = np.array([[1.0,  0.0,   0.0],
                  [0.0, cosP, -sinP],
                  [0.0, sinP,  cosP]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_y(theta):
    """
    Convert single euler angle to corresponding 'Y' DCM.

    Parameters
    ----------
    theta : float
        Euler angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for y-axis rotation
    """
    sinT = np.sin(theta)
    cosT = np.cos(theta)
    R = np.array([[ cosT, 0.0, sinT],
                  [  0.0, 1.0,  0.0],
                  [-sinT, 0.0, cosT]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_z(psi):
    """
    Convert single euler angle to corresponding 'Z' DCM.

    Parameters
    ----------
    psi : float
        Euler angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for z-axis rotation
    """
    sinS = np.sin(psi)
    cosS = np.cos(psi)
    R = np.array([[cosS, -sinS, 0.0],
                  [sinS,  cosS, 0.0],
                  [ 0.0,   0.0, 1.0]],
                 dtype=np.double)
    return R
