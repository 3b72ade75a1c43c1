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
Opt-in validation of attitude inputs.

The conversion routines never check their inputs; degenerate values simply give
degenerate results. Callers that want strict behavior check the invariants here
before (or after) converting: unit norm for quaternions, orthonormality and a
positive determinant for DCMs, and distance from gimbal lock for euler angles.
"""

import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..core.constants import (DCM_ORTHO_TOL, GIMBAL_LOCK_THRESHOLD, HALF_PI,
                              QUAT_NORM_TOL)
from ._array import as_dcm, as_euler, as_quat

logger = logging.getLogger(__name__)


class Degeneracy(Enum):
    """Kinds of degenerate attitude input"""
    NONE = "none"
    NOT_FINITE = "not_finite"  # NaN or inf component
    NON_UNIT_QUATERNION = "non_unit_quaternion"
    NON_ORTHONORMAL = "non_orthonormal"
    IMPROPER_ROTATION = "improper_rotation"  # det = -1, contains a reflection
    GIMBAL_LOCK = "gimbal_lock"


@dataclass
class CheckConfig:
    """Tolerances used by the classification and validation functions"""
    norm_tol: float = QUAT_NORM_TOL
    ortho_tol: float = DCM_ORTHO_TOL
    gimbal_lock_threshold: float = GIMBAL_LOCK_THRESHOLD


class DegenerateAttitudeError(ValueError):
    """Raised by the validate_* functions when an input fails its check"""

    def __init__(self, kind: Degeneracy, message: str):
        super().__init__(message)
        self.kind = kind


def is_unit_quaternion(q, tol: float = QUAT_NORM_TOL) -> bool:
    """Check that `q` is finite and has unit norm within `tol`"""
    q = np.asarray(as_quat(q), dtype=np.float64)
    return bool(np.all(np.isfinite(q)) and abs(np.linalg.norm(q) - 1.0) <= tol)


def is_rotation_matrix(C, tol: float = DCM_ORTHO_TOL) -> bool:
    """Check that `C` is finite, orthonormal within `tol` and has det = +1"""
    C = np.asarray(as_dcm(C), dtype=np.float64)
    if not np.all(np.isfinite(C)):
        return False
    if np.max(np.abs(C @ C.T - np.eye(3))) > tol:
        return False
    return bool(np.linalg.det(C) > 0.0)


def is_gimbal_locked(pitch: float, threshold: float = GIMBAL_LOCK_THRESHOLD) -> bool:
    """Check whether `pitch` (rad) lies within `threshold` of ±π/2"""
    pitch = float(pitch)
    return abs(pitch - HALF_PI) < threshold or abs(pitch + HALF_PI) < threshold


def classify_quaternion(q, config: CheckConfig = None) -> Degeneracy:
    """
    Classify a quaternion.

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]
    config : CheckConfig, optional
        Tolerances, defaults to ``CheckConfig()``

    Returns
    -------
    Degeneracy
        ``NONE`` for a finite unit quaternion, otherwise the failing check
    """
    config = config or CheckConfig()
    q = as_quat(q)

    if not np.all(np.isfinite(q)):
        logger.warning(f"Quaternion has non-finite components: {q}")
        return Degeneracy.NOT_FINITE

    norm = np.linalg.norm(q.astype(np.float64))
    if abs(norm - 1.0) > config.norm_tol:
        logger.warning(f"Quaternion norm {norm:.8f} deviates from 1 by more than {config.norm_tol}")
        return Degeneracy.NON_UNIT_QUATERNION

    return Degeneracy.NONE


def classify_dcm(C, config: CheckConfig = None) -> Degeneracy:
    """
    Classify a direction cosine matrix.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Direction cosine matrix
    config : CheckConfig, optional
        Tolerances, defaults to ``CheckConfig()``

    Returns
    -------
    Degeneracy
        ``NONE`` for a proper rotation matrix, otherwise the failing check
    """
    config = config or CheckConfig()
    C = as_dcm(C).astype(np.float64)

    if not np.all(np.isfinite(C)):
        logger.warning("DCM has non-finite elements")
        return Degeneracy.NOT_FINITE

    ortho_err = np.max(np.abs(C @ C.T - np.eye(3)))
    if ortho_err > config.ortho_tol:
        logger.warning(f"DCM orthonormality error {ortho_err:.3e} exceeds {config.ortho_tol}")
        return Degeneracy.NON_ORTHONORMAL

    det = np.linalg.det(C)
    if det < 0.0:
        logger.warning(f"DCM determinant is {det:.6f}, matrix contains a reflection")
        return Degeneracy.IMPROPER_ROTATION

    return Degeneracy.NONE


def classify_euler(e, config: CheckConfig = None) -> Degeneracy:
    """
    Classify euler angles [roll, pitch, yaw].

    Returns ``GIMBAL_LOCK`` when pitch is close enough to ±π/2 that
    :func:`pyatt.attitude.dcm.dcm2euler` would pin roll to zero.
    """
    config = config or CheckConfig()
    e = as_euler(e)

    if not np.all(np.isfinite(e)):
        logger.warning(f"Euler angles have non-finite components: {e}")
        return Degeneracy.NOT_FINITE

    if is_gimbal_locked(e[1], config.gimbal_lock_threshold):
        logger.debug(f"Pitch {e[1]:.6f} rad is within {config.gimbal_lock_threshold} rad of gimbal lock")
        return Degeneracy.GIMBAL_LOCK

    return Degeneracy.NONE


def validate_quaternion(q, config: CheckConfig = None) -> np.ndarray:
    """
    Return `q` as a float32 array, raising if it is not a unit quaternion.

    Raises
    ------
    DegenerateAttitudeError
        If :func:`classify_quaternion` reports anything but ``NONE``
    """
    kind = classify_quaternion(q, config)
    if kind is not Degeneracy.NONE:
        raise DegenerateAttitudeError(kind, f"Invalid quaternion: {kind.value}")
    return as_quat(q)


def validate_dcm(C, config: CheckConfig = None) -> np.ndarray:
    """
    Return `C` as a float32 array, raising if it is not a proper rotation.

    Raises
    ------
    DegenerateAttitudeError
        If :func:`classify_dcm` reports anything but ``NONE``
    """
    kind = classify_dcm(C, config)
    if kind is not Degeneracy.NONE:
        raise DegenerateAttitudeError(kind, f"Invalid direction cosine matrix: {kind.value}")
    return as_dcm(C)
