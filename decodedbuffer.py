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

from typing import Optional

from chunkdecoder import ChunkDecoder



class DecodedBuffer:
	'''
	A buffer for a UTF-8 byte stream that is to be interpreted as a character
	stream.

	With the append() method, you can append bytes.
	These typically originate from something like a recv() on a network
	socket.

	With the get() method, you can look at the decoded characters (str) that
	are in the buffer.

	With the set() method, you can replace the buffer contents.
	This is typically done to remove parsed characters, e.g.
	buffer.set(buffer.get()[length:])

	With the close() method, you indicate the end of the byte stream.
	Bytes of an incomplete character are then decoded as U+FFFD.
	'''

	def __init__(self) -> None:
		self.decoder = ChunkDecoder() #type: ChunkDecoder
		self.decoded = '' #type: str


	def append(self, b: bytes) -> None:
		'Append bytes from b to the buffer.'

		self._add(self.decoder.push(b))


	def close(self) -> None:
		'Decode whatever is still pending in a lossy way.'

		self._add(self.decoder.flush())


	def _add(self, text: Optional[str]) -> None:
		if text is not None:
			self.decoded += text


	def get(self) -> str:
		'Get the character contents of the buffer.'

		return self.decoded


	def set(self, s: str) -> None:
		'Replace the character buffer with s.'

		self.decoded = s


	def pendingLength(self) -> int:
		'Number of bytes received that are not yet decoded.'

		return self.decoder.bufferedLen()
