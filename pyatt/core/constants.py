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

"""Attitude Constants and Numerical Tolerances"""

import numpy as np

# Angles
HALF_PI = 0.5 * np.pi  # pi/2 (rad)
TWO_PI = 2.0 * np.pi   # 2*pi (rad)

# Gimbal lock
GIMBAL_LOCK_THRESHOLD = 1.0e-3  # distance of pitch from +-pi/2 treated as singular (rad)

# Validation tolerances
QUAT_NORM_TOL = 1.0e-5   # allowed deviation of |q| from 1
DCM_ORTHO_TOL = 1.0e-5   # allowed deviation of C @ C.T from identity

# Boundary precision
BOUNDARY_DTYPE = np.float32  # dtype of values entering and leaving the library

# Shapes
QUAT_SHAPE = (4,)
DCM_SHAPE = (3, 3)
EULER_SHAPE = (3,)
