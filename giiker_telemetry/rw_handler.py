import asyncio, logging, typing, bleak, uuid
from . import log, cmd

class RWHandler:
    BLE_SERVICE = uuid.UUID("0000aaaa-0000-1000-8000-00805f9b34fb")
    BLE_CHARACT_REQ = uuid.UUID("0000aaac-0000-1000-8000-00805f9b34fb")
    BLE_CHARACT_RESP = uuid.UUID("0000aaab-0000-1000-8000-00805f9b34fb")

    cube: 'CubeDevice'

    _rw_cmd_lock: asyncio.Lock
    _recv_queue: typing.Mapping[int, asyncio.Queue]

    def __init__(self, cube: 'CubeDevice'):
        self.cube = cube

        #Responses are matched to requests by their command byte
        self._rw_cmd_lock = asyncio.Lock()
        self._recv_queue = { c: asyncio.Queue() for c in cmd.CMDS }

    async def connect(self):
        await self.cube.ble_client.start_notify(RWHandler.BLE_CHARACT_RESP, self._resp_cb)

    async def send_command(self, req: bytes):
        async with self._rw_cmd_lock:
            log.LOGGER.log(logging.DEBUG, f"[{self.cube}] cmd  -> {req.hex()}")
            await self.cube.ble_client.write_gatt_char(RWHandler.BLE_CHARACT_REQ, req, response=False)

    async def send_rw_command(self, req: bytes) -> bytes:
        if req[0] not in self._recv_queue: raise ValueError(f"command 0x{req[0]:x} has no response")

        fut = asyncio.get_running_loop().create_future()
        async with self._rw_cmd_lock:
            log.LOGGER.log(logging.DEBUG, f"[{self.cube}] req  -> {req.hex()}")

            #Queue us for response handling, and send the request
            await self._recv_queue[req[0]].put(fut)
            await self.cube.ble_client.write_gatt_char(RWHandler.BLE_CHARACT_REQ, req, response=False)

        return await fut

    def fail_pending(self, reason: str):
        #Requests still waiting for a response won't get one on this connection
        for q in self._recv_queue.values():
            while not q.empty():
                fut: asyncio.Future = q.get_nowait()
                if not fut.done(): fut.set_exception(ConnectionError(reason))

    async def _resp_cb(self, charact: bleak.BleakGATTCharacteristic, resp: bytearray):
        async with self._rw_cmd_lock:
            if len(resp) == 0: return

            c = resp[0]
            if c not in self._recv_queue or self._recv_queue[c].empty():
                log.LOGGER.log(logging.DEBUG, f"[{self.cube}] Received unexpected response for command 0x{c:x}: {resp.hex()}")
                return

            #Complete the oldest pending request
            log.LOGGER.log(logging.DEBUG, f"[{self.cube}] resp <- {resp.hex()}")
            fut: asyncio.Future = await self._recv_queue[c].get()
            if not fut.done(): fut.set_result(bytes(resp))
