import unittest

import numpy as np

import cachematrix


class TestCacheMatrix(unittest.TestCase):
    def test_construct_stores_value_with_no_inverse(self):
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = cachematrix.CacheMatrix(a)

        self.assertIs(m.get(), a)
        self.assertIsNone(m.get_inverse())
        self.assertFalse(m.has_inverse())

    def test_construct_does_not_validate(self):
        # Validity is deferred to cache_solve.
        m = cachematrix.CacheMatrix([[1.0, 2.0, 3.0]])
        self.assertEqual(m.get(), [[1.0, 2.0, 3.0]])

    def test_default_is_empty_matrix(self):
        m = cachematrix.make_cache_matrix()
        self.assertEqual(m.get().shape, (0, 0))
        self.assertIsNone(m.get_inverse())

    def test_set_replaces_value_and_clears_inverse(self):
        m = cachematrix.CacheMatrix(np.eye(2))
        m.set_inverse(np.eye(2))
        self.assertTrue(m.has_inverse())

        b = np.array([[2.0, 0.0], [0.0, 2.0]])
        m.set(b)

        self.assertIs(m.get(), b)
        self.assertIsNone(m.get_inverse())

    def test_set_clears_inverse_even_for_same_value(self):
        a = np.eye(3)
        m = cachematrix.CacheMatrix(a)
        m.set_inverse(a)

        m.set(a)
        self.assertIsNone(m.get_inverse())

    def test_set_inverse_is_trusted(self):
        m = cachematrix.CacheMatrix(np.eye(2))
        bogus = np.full((2, 2), 7.0)

        m.set_inverse(bogus)
        self.assertIs(m.get_inverse(), bogus)
        # cache_solve hands back whatever was stored.
        self.assertIs(cachematrix.cache_solve(m), bogus)

    def test_in_place_mutation_is_not_detected(self):
        a = np.array([[2.0, 0.0], [0.0, 2.0]])
        m = cachematrix.CacheMatrix(a)
        first = cachematrix.cache_solve(m)

        a[0, 0] = 4.0
        self.assertIs(cachematrix.cache_solve(m), first)

    def test_holders_are_independent(self):
        m1 = cachematrix.CacheMatrix(np.eye(2))
        m2 = cachematrix.CacheMatrix(np.eye(2) * 4.0)

        cachematrix.cache_solve(m1)
        self.assertTrue(m1.has_inverse())
        self.assertFalse(m2.has_inverse())

    def test_repr_and_str(self):
        m = cachematrix.CacheMatrix(np.array([[1.0, 0.5], [0.0, 2.0]]))

        self.assertEqual(repr(m), "<CacheMatrix shape=(2, 2) cached=False>")
        text = str(m)
        self.assertTrue(text.startswith("CacheMatrix(shape=(2, 2), cached=False)"))
        self.assertIn(" [1 0.5]", text)

        cachematrix.cache_solve(m)
        self.assertIn("cached=True", repr(m))

    def test_str_truncates_large_matrices(self):
        m = cachematrix.CacheMatrix(np.eye(20))
        lines = str(m).splitlines()

        self.assertIn(" ...", lines)
        self.assertIn("...", lines[2])

    def test_str_of_empty_matrix(self):
        m = cachematrix.CacheMatrix()
        self.assertTrue(str(m).endswith("\n[]"))


if __name__ == "__main__":
    unittest.main()
