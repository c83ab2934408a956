#!/usr/bin/env python3
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

import asyncio
import sys
from typing import List, Optional, TextIO

import configuration
import log
import textstream



USAGE = '''Usage: chunkcat [name=value ...]

Copies UTF-8 text from stdin to stdout. Reads stdin in chunks, and
reassembles characters that are split over chunk boundaries.

Configuration values:
  input.readSize  number of bytes per read (default 1024)
  log.file        log file name (default: no logging)
  log.level       DEBUG, INFO, WARNING or ERROR (default INFO)
''' #type: str



async def stdin() -> asyncio.StreamReader: #pragma: nocover
	loop = asyncio.get_running_loop() #type: asyncio.AbstractEventLoop

	reader = asyncio.StreamReader() #type: asyncio.StreamReader
	await loop.connect_read_pipe(
		lambda: asyncio.StreamReaderProtocol(reader),
		sys.stdin
		)
	return reader


async def copyText(stream: textstream.TextStream, output: TextIO) -> int:
	'Copy all text from stream to output; returns the number of characters.'

	count = 0 #type: int
	while True:
		text = await stream.read() #type: Optional[str]
		if text is None:
			break
		output.write(text)
		output.flush()
		count += len(text)
	return count


async def run(conf: configuration.Configuration) -> None:
	reader = await stdin() #type: asyncio.StreamReader
	stream = textstream.TextStream(reader, conf.getReadSize()) #type: textstream.TextStream
	count = await copyText(stream, sys.stdout) #type: int
	log.log('Copied %d characters' % count)


def main(args: Optional[List[str]] = None) -> int:
	if args is None:
		args = sys.argv[1:]

	if '-h' in args or '--help' in args:
		sys.stdout.write(USAGE)
		return 0

	try:
		conf = configuration.Configuration(args) #type: configuration.Configuration
	except ValueError as e:
		sys.stderr.write('Error: %s\n\n%s' % (e, USAGE))
		return 2

	logFile = conf.getValue('log.file') #type: str
	if logFile:
		log.setLogFile(logFile, conf.getLogLevel())

	try:
		asyncio.run(run(conf))
	except KeyboardInterrupt:
		log.log('Interrupted')
		return 130
	return 0



if __name__ == "__main__":
	sys.exit(main()) #pragma: nocover
