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
PyAtt - Attitude Representation Conversions

A Python library for converting 3D orientations between unit quaternions,
direction cosine matrices and roll-pitch-yaw euler angles, with gimbal lock
handling and opt-in validation for telemetry and control code.
"""

__version__ = "1.0.0"
__author__ = "PyAtt Development Team"
__title__ = "pyatt"
__description__ = "Attitude representation conversions"

from .core import *
from .attitude import *
