import logging, typing, bleak, enum, dataclasses, struct
from . import log, cmd, rw_handler, move_handler
from .facelets import to_facelet_string
from .projection import ProjectedState, project_state
from .state import CubeState

@dataclasses.dataclass
class BatteryInfo:
    class ChargeState(enum.Enum):
        NOT_CHARGING = 0x03
        CHARGING = 0x02
        FULLY_CHARGED = 0x01

    level: int
    charge_state: ChargeState

    def __str__(self): return f"{self.level}% {self.charge_state.name}"

class CubeDevice:
    BLE_NAME_PREFIXES = ("Gi", "Hi-G")
    BLE_SERVICES = (str(move_handler.MoveHandler.BLE_SERVICE), str(rw_handler.RWHandler.BLE_SERVICE))

    ble_device: bleak.BLEDevice
    ble_client: typing.Optional[bleak.BleakClient]

    rw_handler: rw_handler.RWHandler
    move_handler: move_handler.MoveHandler

    def __init__(self, dev: bleak.BLEDevice):
        self.ble_device = dev
        self.ble_client = None

        #Create handlers
        self.rw_handler = rw_handler.RWHandler(self)
        self.move_handler = move_handler.MoveHandler(self)

    async def connect(self, timeout: float = 25.0):
        if self.ble_client != None: return

        #Create a client and connect to it
        self.ble_client = bleak.BleakClient(self.ble_device, self._on_disconnect, timeout=timeout)
        try:
            await self.ble_client.connect()

            #Connect handlers
            await self.rw_handler.connect()
            await self.move_handler.connect()
        except Exception:
            await self.disconnect()
            raise

        log.LOGGER.log(logging.INFO, f"Connected to GiiKER cube {self}")

    async def disconnect(self):
        if self.ble_client == None: return

        #Disconnect the client
        client, self.ble_client = self.ble_client, None
        self.rw_handler.fail_pending(f"disconnected from GiiKER cube {self}")
        await client.disconnect()
        log.LOGGER.log(logging.INFO, f"Disconnected from GiiKER cube {self}")

    def _on_disconnect(self, client: bleak.BleakClient):
        if self.ble_client is not client: return
        self.ble_client = None
        self.rw_handler.fail_pending(f"lost connection to GiiKER cube {self}")

        log.LOGGER.log(logging.INFO, f"Lost connection to GiiKER cube {self}")

    @property
    def is_connected(self) -> bool: return self.ble_client != None and self.ble_client.is_connected

    @property
    def state(self) -> typing.Optional[CubeState]: return self.move_handler.cur_state

    @property
    def projected_state(self) -> ProjectedState:
        if self.move_handler.cur_state == None: raise RuntimeError(f"no state received from GiiKER cube {self} yet")
        return project_state(self.move_handler.cur_state)

    @property
    def state_string(self) -> str: return to_facelet_string(self.projected_state)

    async def query_battery(self) -> BatteryInfo:
        resp = await self.rw_handler.send_rw_command(bytes([cmd.CMD_GET_BATTERY]))
        level, charge_state = resp[1], BatteryInfo.ChargeState(resp[2])

        #Clamp the battery level
        if charge_state == BatteryInfo.ChargeState.NOT_CHARGING: level = min(level, 100)
        elif charge_state == BatteryInfo.ChargeState.CHARGING: level = min(level, 99)
        elif charge_state == BatteryInfo.ChargeState.FULLY_CHARGED: level = 100

        info = BatteryInfo(level, charge_state)
        log.LOGGER.log(logging.DEBUG, f"[{self}] battery: {info}")
        return info

    async def query_num_moves(self) -> int:
        steps = struct.unpack(">I", (await self.rw_handler.send_rw_command(bytes([cmd.CMD_GET_ALL_STEP])))[1:5])[0]
        log.LOGGER.log(logging.DEBUG, f"[{self}] #moves: {steps}")
        return steps

    async def reset_solved(self):
        await self.rw_handler.send_command(bytes([cmd.CMD_RESET_SOLVED]))
        log.LOGGER.log(logging.INFO, f"[{self}] reset to solved state")

    async def reset_custom(self):
        await self.rw_handler.send_command(bytes([cmd.CMD_RESET_CUSTOM]))
        log.LOGGER.log(logging.INFO, f"[{self}] reset to custom state")

    def __str__(self): return str(self.ble_device)
