import unittest

import numpy as np

from ffnn.data import xor


class TestXor(unittest.TestCase):

    def test_make(self):
        inputs, targets = xor.make()

        self.assertEqual(4, len(inputs))
        for x, t in zip(inputs, targets):
            self.assertEqual(float(x[0] != x[1]), t[0])

    def test_make_returns_fresh_lists(self):
        inputs, _ = xor.make()
        inputs[0][0] = 5.0

        self.assertEqual([0.0, 0.0], xor.make()[0][0])

    def test_make_stream(self):
        random_state = np.random.RandomState(1234)

        stream = list(xor.make_stream(200, random_state=random_state))

        self.assertEqual(200, len(stream))
        for x, t in stream:
            self.assertEqual(float(x[0] != x[1]), t[0])

        # Every pattern shows up
        self.assertEqual(4, len(set(tuple(x) for x, _ in stream)))

    def test_make_stream_reproducible(self):
        a = list(xor.make_stream(20, random_state=np.random.RandomState(3)))
        b = list(xor.make_stream(20, random_state=np.random.RandomState(3)))

        self.assertEqual(a, b)

    def test_make_stream_invalid(self):
        with self.assertRaises(ValueError):
            list(xor.make_stream(-1))

        with self.assertRaises(ValueError):
            list(xor.make_stream(2.5))


if __name__ == '__main__':
    unittest.main()
