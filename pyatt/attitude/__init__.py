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
Attitude module for conversions between rotation representations.

This module provides the closed set of conversions between:
- Euler angles (roll-pitch-yaw)
- Direction Cosine Matrices (DCM)
- Quaternions [w, x, y, z]

All rotations assume right-hand coordinate frames with euler angles in the order
'roll-pitch-yaw' and DCMs with the order of 'ZYX'. Values cross the interface in
single precision and are computed internally in double precision.

Helpers for angle wrapping, quaternion sign canonicalization and opt-in input
validation are provided alongside.
"""

from .checks import (CheckConfig, Degeneracy, DegenerateAttitudeError,
                     classify_dcm, classify_euler, classify_quaternion,
                     is_gimbal_locked, is_rotation_matrix, is_unit_quaternion,
                     validate_dcm, validate_quaternion)
from .dcm import dcm2euler, dcm2quat
from .euler import euler2dcm, euler2quat, rot_x, rot_y, rot_z
from .quaternion import canonical_quat, quat2dcm, quat2euler
from .wrap import wrapEulerAngles, wrapTo2Pi, wrapToPi

__all__ = [
    'dcm2euler', 'dcm2quat',
    'euler2dcm', 'euler2quat', 'rot_x', 'rot_y', 'rot_z',
    'quat2euler', 'quat2dcm', 'canonical_quat',
    'wrapTo2Pi', 'wrapToPi', 'wrapEulerAngles',
    'CheckConfig', 'Degeneracy', 'DegenerateAttitudeError',
    'is_unit_quaternion', 'is_rotation_matrix', 'is_gimbal_locked',
    'classify_quaternion', 'classify_dcm', 'classify_euler',
    'validate_quaternion', 'validate_dcm',
]
