import asyncio, logging, typing, bleak, uuid
from . import log
from .errors import GiikerError
from .move import Move
from .state import CubeState, decode_frame

MoveCallback = typing.Callable[[CubeState, typing.Optional[Move]], None]

class MoveHandler:
    BLE_SERVICE = uuid.UUID("0000aadb-0000-1000-8000-00805f9b34fb")
    BLE_CHARACT = uuid.UUID("0000aadc-0000-1000-8000-00805f9b34fb")

    cube: 'CubeDevice'
    cur_state: typing.Optional[CubeState]

    _lock: asyncio.Lock
    _handlers: typing.List[MoveCallback]
    _initial_frame: typing.Optional[bytes]

    def __init__(self, cube: 'CubeDevice'):
        self.cube = cube
        self.cur_state = None

        self._lock = asyncio.Lock()
        self._handlers = []
        self._initial_frame = None

    async def connect(self):
        #Read the initial state, its move backlog isn't needed
        resp = bytes(await self.cube.ble_client.read_gatt_char(MoveHandler.BLE_CHARACT))
        self.cur_state = CubeState.decode_state(resp)
        self._initial_frame = resp
        log.LOGGER.log(logging.DEBUG, f"[{self.cube}] state | {resp.hex()} -> {self.cur_state}")

        #Register characteristic callback
        await self.cube.ble_client.start_notify(MoveHandler.BLE_CHARACT, self._recv_cb)

    async def register_handler(self, cb: MoveCallback):
        async with self._lock: self._handlers.append(cb)

    async def unregister_handler(self, cb: MoveCallback):
        async with self._lock: self._handlers.remove(cb)

    async def _recv_cb(self, charact: bleak.BleakGATTCharacteristic, resp: bytearray):
        resp = bytes(resp)

        #Some cubes repeat the initial state right after subscribing, that's not a move
        initial_frame, self._initial_frame = self._initial_frame, None
        if resp == initial_frame:
            log.LOGGER.log(logging.DEBUG, f"[{self.cube}] dropping repeated initial state {resp.hex()}")
            return

        try: frame = decode_frame(resp)
        except GiikerError as e:
            log.LOGGER.log(logging.WARNING, f"[{self.cube}] dropping undecodable state frame {resp.hex()}: {e}")
            return

        move = frame.last_move
        log.LOGGER.log(logging.DEBUG, f"[{self.cube}] move | {resp.hex()} {str(move or '-'):3s} -> {frame.state}")

        #Invoke handlers
        async with self._lock:
            self.cur_state = frame.state
            for h in self._handlers: h(frame.state, move)
