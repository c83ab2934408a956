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

import logging
import os
import sys
import unittest
from unittest.mock import patch

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

import log



class TestLog(unittest.TestCase):
	def test_writingLogLines(self):
		with self.assertLogs(level=logging.DEBUG) as cm:
			log.log('Foobar')
			log.logDebug('Details')

			try:
				raise Exception('Test exception')
			except Exception:
				log.logException()

		self.assertEqual(cm.records[0].levelno, logging.INFO)
		self.assertEqual(cm.records[0].getMessage(), 'Foobar')
		self.assertEqual(cm.records[1].levelno, logging.DEBUG)
		self.assertEqual(cm.records[1].getMessage(), 'Details')
		self.assertEqual(cm.records[2].levelno, logging.ERROR)
		self.assertIn('Test exception', str(cm.records[2].exc_info[1]))


	def test_setLogFile(self):
		with patch.object(logging, 'basicConfig') as m:
			with self.assertLogs(level=logging.INFO):
				log.setLogFile('_testLogFile', logging.DEBUG)
		m.assert_called_once_with(
			filename='_testLogFile',
			format='%(asctime)s %(levelname)s: %(message)s',
			level=logging.DEBUG,
			force=True
			)



if __name__ == '__main__':
	unittest.main(verbosity=2)
