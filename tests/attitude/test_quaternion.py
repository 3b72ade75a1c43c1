import unittest
import numpy as np
from pyatt.attitude.quaternion import quat2dcm, quat2euler, canonical_quat
from pyatt.attitude.dcm import dcm2euler, dcm2quat
from pyatt.attitude.euler import euler2quat


def random_unit_quaternions(n, seed=42):
    rng = np.random.default_rng(seed)
    q = rng.normal(size=(n, 4))
    return q / np.linalg.norm(q, axis=1)[:, None]


class TestQuat2Dcm(unittest.TestCase):

    def test_identity(self):
        C = quat2dcm(np.array([1.0, 0.0, 0.0, 0.0]))
        np.testing.assert_array_equal(C, np.eye(3))

    def test_output_type(self):
        C = quat2dcm([1.0, 0.0, 0.0, 0.0])
        self.assertEqual(C.shape, (3, 3))
        self.assertEqual(C.dtype, np.float32)

    def test_yaw_90_degrees(self):
        # 90 deg about z maps x onto y
        q = np.array([np.cos(np.pi/4), 0.0, 0.0, np.sin(np.pi/4)])
        C = quat2dcm(q)
        expected = np.array([[0.0, -1.0, 0.0],
                             [1.0,  0.0, 0.0],
                             [0.0,  0.0, 1.0]])
        np.testing.assert_allclose(C, expected, atol=1e-6)

    def test_orthonormality(self):
        for q in random_unit_quaternions(50):
            C = quat2dcm(q).astype(np.float64)
            np.testing.assert_allclose(np.linalg.norm(C, axis=1), np.ones(3), atol=1e-5)
            self.assertAlmostEqual(C[0] @ C[1], 0.0, delta=1e-5)
            self.assertAlmostEqual(C[0] @ C[2], 0.0, delta=1e-5)
            self.assertAlmostEqual(C[1] @ C[2], 0.0, delta=1e-5)
            self.assertAlmostEqual(np.linalg.det(C), 1.0, delta=1e-5)

    def test_non_unit_quaternion_not_normalized(self):
        # scaled quaternion scales the matrix by |q|^2
        C = quat2dcm(np.array([2.0, 0.0, 0.0, 0.0]))
        np.testing.assert_allclose(C, 4.0 * np.eye(3))

    def test_input_not_modified(self):
        q = np.array([0.5, 0.5, 0.5, 0.5])
        q_copy = q.copy()
        quat2dcm(q)
        quat2euler(q)
        np.testing.assert_array_equal(q, q_copy)

    def test_invalid_shape(self):
        with self.assertRaises(ValueError) as context:
            quat2dcm(np.array([1.0, 0.0, 0.0]))
        self.assertIn("shape (4,)", str(context.exception))


class TestQuaternionRoundTrip(unittest.TestCase):

    def test_quat_dcm_round_trip(self):
        for q in random_unit_quaternions(100):
            q32 = q.astype(np.float32)
            q_recovered = dcm2quat(quat2dcm(q))

            # q and -q are the same rotation
            if np.dot(q_recovered, q32) < 0:
                q_recovered = -q_recovered
            np.testing.assert_allclose(q_recovered, q32, atol=1e-5,
                                       err_msg=f"Round-trip failed for {q}")


class TestQuat2Euler(unittest.TestCase):

    def test_identity(self):
        np.testing.assert_array_equal(quat2euler([1.0, 0.0, 0.0, 0.0]), np.zeros(3))

    def test_composition_is_exact(self):
        for q in random_unit_quaternions(50, seed=7):
            np.testing.assert_array_equal(quat2euler(q), dcm2euler(quat2dcm(q)))

    def test_known_angles(self):
        e = np.array([0.1, 0.2, 0.3])
        q = euler2quat(e)
        np.testing.assert_allclose(quat2euler(q), e, atol=1e-6)

    def test_output_type(self):
        e = quat2euler([0.5, 0.5, 0.5, 0.5])
        self.assertEqual(e.shape, (3,))
        self.assertEqual(e.dtype, np.float32)


class TestCanonicalQuat(unittest.TestCase):

    def test_negative_scalar_flipped(self):
        q = canonical_quat([-0.5, 0.5, -0.5, 0.5])
        np.testing.assert_array_equal(q, np.array([0.5, -0.5, 0.5, -0.5], dtype=np.float32))

    def test_positive_scalar_kept(self):
        q = np.array([0.5, 0.5, -0.5, 0.5])
        np.testing.assert_array_equal(canonical_quat(q), q.astype(np.float32))

    def test_same_rotation(self):
        q = np.array([-0.7, 0.1, 0.7, -0.1])
        q /= np.linalg.norm(q)
        np.testing.assert_allclose(quat2dcm(canonical_quat(q)), quat2dcm(q), atol=1e-6)


if __name__ == '__main__':
    unittest.main()
