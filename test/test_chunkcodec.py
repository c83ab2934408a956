#    Copyright (C) 2026 by Bitonic B.V.
#
#    This file is part of the UTF-8 Chunker.
#
#    The UTF-8 Chunker is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    The UTF-8 Chunker is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with the UTF-8 Chunker. If not, see <http://www.gnu.org/licenses/>.

import codecs
import os
import sys
import unittest

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

import chunkcodec



class TestIncrementalDecoder(unittest.TestCase):
	def test_decode(self):
		d = chunkcodec.IncrementalDecoder()
		self.assertIsInstance(d, codecs.IncrementalDecoder)
		self.assertEqual(d.errors, 'replace')

		self.assertEqual(d.decode(b'hi\xed\x95'), 'hi')
		self.assertEqual(d.decode(b''), '')
		self.assertEqual(d.decode(b'\x9cbye'), '한bye')
		self.assertEqual(d.decode(b'', final=True), '')


	def test_final(self):
		d = chunkcodec.IncrementalDecoder()
		self.assertEqual(d.decode(b'\xf0\x9f'), '')
		self.assertEqual(d.decode(b'\xa6\x80!\xed', final=True), '🦀!\ufffd')
		self.assertEqual(d.getstate(), (b'', 0))

		d = chunkcodec.IncrementalDecoder()
		self.assertEqual(d.decode(b'\xed\x95', final=True), '\ufffd')


	def test_state(self):
		d = chunkcodec.IncrementalDecoder()
		d.decode(b'\xed\x95')
		self.assertEqual(d.getstate(), (b'\xed\x95', 0))

		d2 = chunkcodec.IncrementalDecoder()
		d2.setstate(d.getstate())
		self.assertEqual(d2.decode(b'\x9c'), '한')

		d.reset()
		self.assertEqual(d.getstate(), (b'', 0))
		self.assertEqual(d.decode(b'\x9c', final=True), '\ufffd')


	def test_iterdecode(self):
		chunks = [b'\xea\xb0', b'\x80\xeb', b'\x82', b'\x98']
		expected = ''.join(codecs.iterdecode(chunks, 'UTF-8'))

		decoder = chunkcodec.IncrementalDecoder()
		text = ''.join(decoder.decode(c) for c in chunks) + decoder.decode(b'', True)
		self.assertEqual(text, expected)
		self.assertEqual(text, '가나')


	def test_errors(self):
		with self.assertRaises(ValueError):
			chunkcodec.IncrementalDecoder('strict')


	def test_invalidState(self):
		d = chunkcodec.IncrementalDecoder()
		for pending in [b'\x80' * 10, b'\xc3\xa9', b'a', b'\xff', b'\xf0\x9f\xa6\x80']:
			with self.assertRaises(ValueError):
				d.setstate((pending, 0))
			self.assertEqual(d.decoder.bufferedLen(), 0)

		d.setstate((b'\xf0\x9f\xa6', 0))
		self.assertEqual(d.decoder.bufferedLen(), 3)
		d.setstate((b'', 0))
		self.assertTrue(d.decoder.isEmpty())



if __name__ == '__main__':
	unittest.main(verbosity=2)
