import unittest
import numpy as np
from pyatt.attitude.euler import euler2dcm
from pyatt.attitude.wrap import wrapEulerAngles, wrapTo2Pi, wrapToPi


class TestWrapTo2Pi(unittest.TestCase):

    def test_values(self):
        self.assertAlmostEqual(float(wrapTo2Pi(0.0)), 0.0)
        self.assertAlmostEqual(float(wrapTo2Pi(-np.pi / 2)), 3 * np.pi / 2)
        self.assertAlmostEqual(float(wrapTo2Pi(5 * np.pi)), np.pi)

    def test_positive_multiple_maps_to_two_pi(self):
        self.assertEqual(float(wrapTo2Pi(2 * np.pi)), 2 * np.pi)
        self.assertEqual(float(wrapTo2Pi(4 * np.pi)), 2 * np.pi)

    def test_array(self):
        v = np.array([-0.5, 0.5, 7.0])
        np.testing.assert_allclose(wrapTo2Pi(v), [2 * np.pi - 0.5, 0.5, 7.0 - 2 * np.pi])


class TestWrapToPi(unittest.TestCase):

    def test_inside_unchanged(self):
        v = np.array([-np.pi, -1.0, 0.0, 1.0, np.pi])
        np.testing.assert_array_equal(wrapToPi(v), v)

    def test_outside(self):
        np.testing.assert_allclose(wrapToPi(np.array([3 * np.pi / 2, -3 * np.pi / 2, 7.0])),
                                   [-np.pi / 2, np.pi / 2, 7.0 - 2 * np.pi])

    def test_input_not_modified(self):
        v = np.array([4.0, -4.0])
        wrapToPi(v)
        np.testing.assert_array_equal(v, [4.0, -4.0])


class TestWrapEulerAngles(unittest.TestCase):

    def test_principal_range_unchanged(self):
        e = np.array([0.1, -0.2, 3.0])
        np.testing.assert_allclose(wrapEulerAngles(e), e)

    def test_pitch_folded(self):
        e = np.array([0.1, np.pi - 0.2, 0.3])
        np.testing.assert_allclose(wrapEulerAngles(e), [0.1 - np.pi, 0.2, 0.3 - np.pi], atol=1e-12)

    def test_same_rotation(self):
        for e in ([0.4, 2.5, -1.0], [-3.0, -2.0, 6.0], [7.0, 8.0, -9.0]):
            e2 = wrapEulerAngles(e)
            self.assertLessEqual(abs(e2[1]), np.pi / 2)
            self.assertLessEqual(abs(e2[0]), np.pi)
            self.assertLessEqual(abs(e2[2]), np.pi)
            np.testing.assert_allclose(euler2dcm(e2), euler2dcm(e), atol=1e-5)

    def test_invalid_shape(self):
        with self.assertRaises(ValueError):
            wrapEulerAngles([0.1, 0.2])


if __name__ == '__main__':
    unittest.main()
