import unittest

from png2zpl.exceptions import InvalidCompressedDataException
from png2zpl.zpl_compression import (
    hex_encode, hex_decode, count_prefix, compress, decompress
)


class TestHexEncoding(unittest.TestCase):

    def test_single_bytes(self):
        self.assertEqual(hex_encode(b'\x80'), '80')
        self.assertEqual(hex_encode(b'\xff'), 'FF')
        self.assertEqual(hex_encode(b'\x00\x0a'), '000A')

    def test_every_byte_value_round_trips(self):
        data = bytes(range(256))
        encoded = hex_encode(data)
        self.assertEqual(len(encoded), 512)
        self.assertEqual(hex_decode(encoded), data)

    def test_empty(self):
        self.assertEqual(hex_encode(b''), '')


class TestCountPrefix(unittest.TestCase):

    def test_tiers(self):
        expected = {
            1: 'G',
            3: 'I',
            19: 'Y',
            20: 'g',
            21: 'gG',
            360: 'x',
            380: 'y',
            399: 'yY',
            400: 'z',
            401: 'zG',
            423: 'zgI',
            800: 'zz',
            1234: 'zzzgT',
        }
        for run, prefix in expected.items():
            with self.subTest(run=run):
                self.assertEqual(count_prefix(run), prefix)


class TestCompress(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(compress(''), '')

    def test_twenty_zeros(self):
        self.assertEqual(compress('0' * 20), 'g0')

    def test_four_hundred(self):
        self.assertEqual(compress('A' * 400), 'zA')

    def test_four_hundred_twenty_three(self):
        self.assertEqual(compress('B' * 423), 'zgIB')

    def test_short_runs_pass_through(self):
        self.assertEqual(compress('80'), '80')
        self.assertEqual(compress('FF'), 'FF')
        self.assertEqual(compress('F'), 'F')
        self.assertEqual(compress('0FF0'), '0FF0')
        self.assertEqual(compress('AABBA'), 'AABBA')

    def test_mixed_runs(self):
        self.assertEqual(compress('0000FF1'), 'J0FF1')
        self.assertEqual(compress('FFF' + '0' * 45 + '8'), 'IFhK08')

    def test_never_longer_than_input(self):
        for data in ['0', '00', '000', '0123456789ABCDEF', 'F' * 1234,
                     '00FF' * 50]:
            with self.subTest(data=data[:16]):
                self.assertLessEqual(len(compress(data)), len(data))


class TestDecompress(unittest.TestCase):

    def test_run_length_round_trip(self):
        for n in [1, 2, 3, 19, 20, 21, 399, 400, 401, 800, 1234]:
            for char in '0Fa':
                with self.subTest(n=n, char=char):
                    self.assertEqual(
                        decompress(compress(char * n)), char * n
                    )

    def test_mixed_round_trip(self):
        data = '80' + '0' * 57 + 'FFF' + 'E' * 401 + '1' + 'C0' * 7
        self.assertEqual(decompress(compress(data)), data)

    def test_uncounted_characters_copied(self):
        self.assertEqual(decompress('80FF'), '80FF')

    def test_empty(self):
        self.assertEqual(decompress(''), '')

    def test_dangling_count(self):
        with self.assertRaises(InvalidCompressedDataException) as cm:
            decompress('ABgJ')
        self.assertEqual(cm.exception.position, 2)
        self.assertEqual(cm.exception.data, 'ABgJ')
