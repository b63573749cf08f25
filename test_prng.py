from __future__ import annotations

import random
import unittest
from unittest import mock

from saltkit import InvalidRange, generate_random_number
from saltkit.prng import derive_seed


class DeriveSeedTests(unittest.TestCase):
    def test_sign_bit_cleared(self):
        self.assertEqual(derive_seed(b"\xff\xff\xff\xff"), 0x7FFFFFFF)
        self.assertEqual(derive_seed(b"\x80\x00\x00\x00"), 0)

    def test_big_endian(self):
        self.assertEqual(derive_seed(b"\x12\x34\x56\x78"), 0x12345678)

    def test_wrong_size(self):
        with self.assertRaises(ValueError):
            derive_seed(b"\x01\x02\x03")
        with self.assertRaises(ValueError):
            derive_seed(b"\x01\x02\x03\x04\x05")


class GenerateRandomNumberTests(unittest.TestCase):
    def test_values_stay_in_range_and_hit_endpoints(self):
        seen = set()
        for _ in range(2000):
            v = generate_random_number(-3, 3)
            self.assertGreaterEqual(v, -3)
            self.assertLessEqual(v, 3)
            seen.add(v)
        self.assertEqual(seen, set(range(-3, 4)))

    def test_single_value_range(self):
        for v in (-10, 0, 7, 2**40):
            self.assertEqual(generate_random_number(v, v), v)

    def test_invalid_range_checked_before_entropy(self):
        with mock.patch("saltkit.entropy.Random.new") as new:
            with self.assertRaises(InvalidRange):
                generate_random_number(5, 4)
            new.assert_not_called()

    def test_invalid_range_is_value_error(self):
        with self.assertRaises(ValueError):
            generate_random_number(1, 0)

    def test_draw_uses_seeded_generator(self):
        fake = mock.Mock()
        fake.read.return_value = b"\xff\x12\x34\x56"
        with mock.patch("saltkit.entropy.Random.new", return_value=fake):
            v = generate_random_number(1, 100)
        self.assertEqual(v, random.Random(0x7F123456).randint(1, 100))
        fake.read.assert_called_once_with(4)
        fake.close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
