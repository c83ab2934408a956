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



LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s' #type: str



def setLogFile(filename: str, level: int = logging.INFO) -> None:
	logging.basicConfig(
		filename=filename,
		format=LOG_FORMAT,
		level=level,
		force=True
		)
	log('Opened the log file')


def log(s: str) -> None:
	logging.info(s)


def logDebug(s: str) -> None:
	logging.debug(s)


def logException() -> None:
	logging.exception('')
