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

"""Core Attitude Module.

Constants shared by the attitude conversions and the validation layer:

- **Angles**: ``HALF_PI`` and ``TWO_PI`` used by extraction and wrapping
- **Gimbal lock**: ``GIMBAL_LOCK_THRESHOLD``, the distance (rad) of pitch from
  +-pi/2 at which roll is pinned to zero
- **Tolerances**: default unit-norm and orthonormality tolerances
- **Boundary precision**: single-precision dtype and the expected array shapes
"""

from .constants import *
