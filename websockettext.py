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
from typing import Any, Optional, Union

import websockets
import websockets.exceptions

from chunkdecoder import ChunkDecoder
from log import log, logException



class WebSocketText:
	'''
	Receives a UTF-8 byte stream as a sequence of websocket messages.
	A character may be split over several messages.
	Decoded text is passed to handleText().
	'''

	#This initialization is just to inform Mypy about data types.
	receiveTask = None #type: asyncio.Future
	websocket = None #type: Any

	def __init__(self) -> None:
		self.decoder = ChunkDecoder() #type: ChunkDecoder


	async def startup(self, url: str) -> None:
		self.websocket = await websockets.connect(url)
		log('Connected to ' + url)
		self.receiveTask = asyncio.ensure_future(self.handleIncomingData()) #type: ignore #mypy has weird ideas about ensure_future


	async def shutdown(self) -> None:
		self.receiveTask.cancel()
		await self.waitFinished()


	async def waitFinished(self) -> None:
		await self.receiveTask


	async def handleIncomingData(self) -> None:
		try:
			try:
				while True:
					message = await self.websocket.recv() #type: Union[bytes, str]
					if isinstance(message, str):
						message = message.encode('UTF-8')
					self.deliver(self.decoder.push(message))
			except asyncio.CancelledError:
				await self.websocket.close()
				#We're cancelled, so just quit the function
			except websockets.exceptions.ConnectionClosed:
				#End of the stream: finish incomplete characters
				self.deliver(self.decoder.flush())
		except Exception:
			logException()


	def deliver(self, text: Optional[str]) -> None:
		if text is not None:
			self.handleText(text)


	def handleText(self, text: str) -> None:
		pass #To be overloaded in derived classes
