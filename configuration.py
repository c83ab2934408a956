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
from typing import Dict, List, Optional

import settings



LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR'] #type: List[str]



class Configuration:
	'''
	Configuration values, given on the command line as name=value
	arguments, e.g. input.readSize=4096.
	'''

	def __init__(self, args: Optional[List[str]] = None) -> None:
		self.values = \
		{
		'input.readSize': str(settings.readSize),
		'log.file'      : '',
		'log.level'     : 'INFO',
		} #type: Dict[str, str]

		for arg in args or []:
			if '=' not in arg:
				raise ValueError('Expected name=value, got: ' + arg)
			name, value = arg.split('=', 1)
			if name not in self.values:
				raise ValueError('Unknown configuration value: ' + name)
			self.setValue(name, value)

		if self.getReadSize() <= 0:
			raise ValueError('input.readSize must be positive')
		if self.getValue('log.level') not in LOG_LEVELS:
			raise ValueError('log.level must be one of ' + ', '.join(LOG_LEVELS))


	def setValue(self, name: str, value: str) -> None:
		assert name in self.values

		self.values[name] = value


	def getValue(self, name: str) -> str:
		assert name in self.values

		return self.values[name]


	def getReadSize(self) -> int:
		value = self.getValue('input.readSize') #type: str
		try:
			return int(value)
		except ValueError:
			raise ValueError('input.readSize is not a number: ' + value)


	def getLogLevel(self) -> int:
		return getattr(logging, self.getValue('log.level'))
