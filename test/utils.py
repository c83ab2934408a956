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

import websockets.exceptions



def asynciotest(oldMethod):
	def newMethod(self):
		return asyncio.run(oldMethod(self))

	return newMethod



class DummyReader:
	def __init__(self, buffer = b''):
		self.buffer = buffer
		self.readSizes = []


	async def read(self, n):
		self.readSizes.append(n)
		ret = self.buffer[:n]
		self.buffer = self.buffer[n:]
		return ret



class DummyWebSocket:
	def __init__(self, messages = []):
		self.messages = list(messages)
		self.closed = False


	async def recv(self):
		if not self.messages:
			raise websockets.exceptions.ConnectionClosedOK(None, None)
		return self.messages.pop(0)


	async def close(self):
		self.closed = True



class BlockingWebSocket(DummyWebSocket):
	async def recv(self):
		await asyncio.Future()
