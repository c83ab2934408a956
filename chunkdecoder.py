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

from log import logDebug



#A complete UTF-8 sequence is at most 4 bytes, so at most 3 can be pending:
MAX_PENDING_LENGTH = 3 #type: int

#Number of trailing bytes inspected when looking for an incomplete sequence:
CHECK_LENGTH = MAX_PENDING_LENGTH + 1 #type: int



class ChunkDecoder:
	'''
	Incremental UTF-8 decoder for a byte stream that arrives in chunks.

	With the push() method, you can feed bytes in arrival order.
	These typically originate from something like a recv() on a network
	socket, so a multi-byte character may be split over several chunks.
	push() returns the text that is complete so far (or None), and keeps
	the bytes of an incomplete character until the rest of it arrives.

	With the flush() method, you declare that no more bytes will arrive.
	Any bytes that are still pending are decoded in a lossy way, so
	incomplete characters become U+FFFD.

	Malformed bytes that can never become valid are dropped silently.
	'''

	def __init__(self) -> None:
		self.pending = b'' #type: bytes


	def push(self, data: bytes) -> Optional[str]:
		'Process a chunk of bytes; return any complete text, or None.'

		if not data:
			return None

		#Fast path: nothing is pending and the chunk is complete by itself
		if not self.pending:
			try:
				return str(data, 'UTF-8')
			except UnicodeDecodeError:
				pass #handled below, together with the pending bytes

		buffer = self.pending + data #type: bytes
		try:
			text = str(buffer, 'UTF-8') #type: str
		except UnicodeDecodeError as e:
			return self._splitIncomplete(buffer, e.start)

		self.pending = b''
		return text


	def _splitIncomplete(self, buffer: bytes, validLength: int) -> Optional[str]:
		trailing = buffer[validLength:] #type: bytes
		keepLength = incompleteSequenceLength(trailing) #type: int

		if keepLength > 0:
			self.pending = trailing[-keepLength:]
		else:
			self.pending = b''

		droppedLength = len(trailing) - keepLength #type: int
		if droppedLength > 0:
			logDebug('Dropping %d malformed UTF-8 byte(s)' % droppedLength)

		if validLength == 0:
			return None

		#The decoder already verified this part:
		return str(buffer[:validLength], 'UTF-8')


	def flush(self) -> Optional[str]:
		'''
		Decode the pending bytes, replacing incomplete characters with
		U+FFFD, and return the decoder to its initial state.

		Returns None if nothing is pending.
		'''

		if not self.pending:
			return None

		text = str(self.pending, 'UTF-8', 'replace') #type: str
		self.pending = b''
		return text


	def isEmpty(self) -> bool:
		return not self.pending


	def bufferedLen(self) -> int:
		return len(self.pending)



def incompleteSequenceLength(trailing: bytes) -> int:
	'''
	Determine how many bytes at the end of trailing form an incomplete
	UTF-8 sequence that may still be completed by more data.

	trailing must start at the first byte that failed UTF-8 validation.
	Returns the number of bytes to keep, or 0 if these bytes can never
	become valid.
	'''

	if not trailing:
		return 0

	window = trailing[-CHECK_LENGTH:] #type: bytes

	#Walk forward from the start of the window to its first leading byte
	for pos, byte in enumerate(window):
		available = len(window) - pos #type: int

		if byte & 0x80 == 0:
			#ASCII: it can not be part of an incomplete sequence
			if available == 1:
				return 0
			continue

		if byte & 0xC0 != 0x80:
			#Leading byte
			expectedLength = sequenceLength(byte) #type: int
			if expectedLength > 0 and available < expectedLength:
				return available
			return 0

		#Continuation byte: keep looking for the leading byte

	#Only continuation bytes; malformed, but more data might still resolve it
	return min(len(window), MAX_PENDING_LENGTH)


def sequenceLength(byte: int) -> int:
	'Length of a UTF-8 sequence according to its leading byte; 0 if invalid.'

	if byte & 0x80 == 0:
		return 1
	if byte & 0xE0 == 0xC0:
		return 2
	if byte & 0xF0 == 0xE0:
		return 3
	if byte & 0xF8 == 0xF0:
		return 4
	return 0



def main(): #pragma: nocover
	d = ChunkDecoder()
	print(d.push(b'Corn\xc3'))
	print(d.pending)
	print(d.push(b'\xa9 Plooy \xf0\x9f'))
	print(d.pending)
	print(d.flush())
	print(d.pending)



if __name__ == "__main__":
	main() #pragma: nocover
