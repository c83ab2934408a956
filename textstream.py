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
from typing import AsyncIterator, Optional

import decodedbuffer
from log import log
import settings



class BufferLimitExceeded(Exception):
	pass



class TextStream:
	'''
	Reads UTF-8 text from an asyncio.StreamReader (or anything else with
	an async read(n) method).

	Characters that are split over several reads are reassembled.
	At the end of the stream, any incomplete character is returned as
	U+FFFD.
	'''

	def __init__(self, inputStream: asyncio.StreamReader, readSize: int = settings.readSize) -> None:
		self.inputStream = inputStream #type: asyncio.StreamReader
		self.readSize = readSize #type: int

		self.inputBuffer = decodedbuffer.DecodedBuffer() #type: decodedbuffer.DecodedBuffer
		self.finished = False #type: bool


	async def receive(self) -> None:
		newData = await self.inputStream.read(self.readSize) #type: bytes
		if not newData: #EOF
			self.finished = True
			self.inputBuffer.close()
			return
		self.inputBuffer.append(newData)


	async def read(self) -> Optional[str]:
		'Returns the next decoded text, or None at the end of the stream.'

		while not self.inputBuffer.get() and not self.finished:
			await self.receive()

		text = self.inputBuffer.get() #type: str
		self.inputBuffer.set('')
		if not text:
			return None
		return text


	async def readLine(self) -> Optional[str]:
		'''
		Returns the next line, including its line ending, or None at the
		end of the stream. The last line may lack a line ending.
		'''

		while True:
			text = self.inputBuffer.get() #type: str
			pos = text.find('\n') #type: int
			if pos >= 0:
				self.inputBuffer.set(text[pos+1:])
				return text[:pos+1]

			if self.finished:
				self.inputBuffer.set('')
				if not text:
					return None
				return text

			if len(text) > settings.maxBufferLength:
				log('Text stream error: maximum line length exceeded. We\'re probably not receiving line-based data.')
				self.inputBuffer.set('')
				raise BufferLimitExceeded('Maximum receive buffer length exceeded - throwing away data')

			await self.receive()



async def utf8SafeStream(inputStream: asyncio.StreamReader, readSize: int = settings.readSize) -> AsyncIterator[str]:
	'Async generator of the UTF-8 text in inputStream.'

	stream = TextStream(inputStream, readSize) #type: TextStream
	while True:
		text = await stream.read() #type: Optional[str]
		if text is None:
			break
		yield text
