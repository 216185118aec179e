import unittest

import numpy as np

from cachematrix._internal.linalg import solve


class TestSolve(unittest.TestCase):
    def test_inverse_matches_numpy(self):
        np.random.seed(42)
        n = 20
        a = np.random.rand(n, n) + np.eye(n) * 2.0
        max_diff = np.max(np.abs(solve(a) - np.linalg.inv(a)))
        self.assertLess(max_diff, 1e-10)

    def test_accepts_nested_lists(self):
        inv = solve([[2, 0], [0, 4]])
        np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.25]])

    def test_right_hand_side(self):
        a = [[1.0, 1.0], [1.0, -1.0]]
        x = solve(a, [3.0, 1.0])
        np.testing.assert_allclose(x, [2.0, 1.0])

    def test_numerically_singular_raises(self):
        u = np.random.default_rng(0).random((4, 2))
        with self.assertRaises(np.linalg.LinAlgError) as ctx:
            solve(u @ u.T)
        self.assertIn("reciprocal condition number", str(ctx.exception))

    def test_numerically_singular_with_right_hand_side_raises(self):
        u = np.random.default_rng(1).random((3, 1))
        with self.assertRaises(np.linalg.LinAlgError):
            solve(u @ u.T, np.ones(3))

    def test_tol(self):
        a = np.diag([1.0, 1e-6])
        np.testing.assert_allclose(solve(a, tol=1e-7), np.diag([1.0, 1e6]))
        with self.assertRaises(np.linalg.LinAlgError):
            solve(a, tol=1e-5)
        with self.assertRaises(np.linalg.LinAlgError):
            solve(a, [1.0, 1.0], tol=1e-5)

    def test_singular_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            solve(np.zeros((3, 3)))

    def test_non_square_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            solve(np.ones((3, 2)))


if __name__ == "__main__":
    unittest.main()
