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
Boundary conversion of attitude arrays.

Values enter and leave the library in single precision. These helpers turn any
array-like into a fresh contiguous ``float32`` array of the expected shape so the
compiled kernels always see the same argument types.
"""

import numpy as np

from ..core.constants import BOUNDARY_DTYPE, DCM_SHAPE, EULER_SHAPE, QUAT_SHAPE


def _as_boundary(a, shape, name):
    arr = np.array(a, dtype=BOUNDARY_DTYPE, copy=True, order='C')
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}")
    return arr


def as_quat(q):
    """Return `q` as a float32 array of shape (4,) ordered [w, x, y, z]."""
    return _as_boundary(q, QUAT_SHAPE, "quaternion")


def as_dcm(C):
    """Return `C` as a float32 array of shape (3, 3)."""
    return _as_boundary(C, DCM_SHAPE, "direction cosine matrix")


def as_euler(e):
    """Return `e` as a float32 array of shape (3,) ordered [roll, pitch, yaw]."""
    return _as_boundary(e, EULER_SHAPE, "euler angles")
