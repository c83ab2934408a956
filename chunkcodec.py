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
from typing import Tuple

import chunkdecoder
from chunkdecoder import ChunkDecoder



class IncrementalDecoder(codecs.IncrementalDecoder):
	'''
	codecs.IncrementalDecoder interface on top of ChunkDecoder, for code
	that expects the standard incremental decoder protocol.

	Only the 'replace' error policy is available: malformed bytes are
	dropped while decoding, and incomplete characters become U+FFFD once
	decode() is called with final=True.
	'''

	def __init__(self, errors: str = 'replace') -> None:
		if errors != 'replace':
			raise ValueError('Unsupported error policy: ' + errors)
		codecs.IncrementalDecoder.__init__(self, errors)
		self.decoder = ChunkDecoder() #type: ChunkDecoder


	def decode(self, input: bytes, final: bool = False) -> str:
		text = self.decoder.push(input) or '' #type: str
		if final:
			text += self.decoder.flush() or ''
		return text


	def reset(self) -> None:
		self.decoder = ChunkDecoder()


	def getstate(self) -> Tuple[bytes, int]:
		return (self.decoder.pending, 0)


	def setstate(self, state: Tuple[bytes, int]) -> None:
		pending = bytes(state[0]) #type: bytes
		#Only states the decoder itself can reach; at most 3 bytes
		if chunkdecoder.incompleteSequenceLength(pending) != len(pending):
			raise ValueError('Not an incomplete UTF-8 sequence: ' + repr(pending))
		self.decoder.pending = pending
