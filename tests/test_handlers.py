import asyncio, types
import pytest
from giiker_telemetry import BatteryInfo, CubeDevice, Face, NibbleDomainError
from giiker_telemetry.move_handler import MoveHandler
from giiker_telemetry.rw_handler import RWHandler
from giiker_telemetry.scan import is_cube_advertisement

SOLVED_FRAME = bytes.fromhex("12345678 33333333 123456789abc 0000")

class FakeClient:
    def __init__(self, initial: bytes, responses=None):
        self.initial = initial
        self.responses = responses or {}
        self.notify_cbs = {}
        self.writes = []
        self.is_connected = True

    async def disconnect(self): self.is_connected = False

    async def read_gatt_char(self, charact): return bytearray(self.initial)

    async def start_notify(self, charact, cb): self.notify_cbs[str(charact)] = cb

    async def write_gatt_char(self, charact, data, response=None):
        assert str(charact) == str(RWHandler.BLE_CHARACT_REQ)
        self.writes.append(bytes(data))
        if data[0] in self.responses: asyncio.ensure_future(self.notify(RWHandler.BLE_CHARACT_RESP, self.responses[data[0]]))

    async def notify(self, charact, data: bytes): await self.notify_cbs[str(charact)](None, bytearray(data))

async def connected_cube(client: FakeClient) -> CubeDevice:
    cube = CubeDevice(types.SimpleNamespace(name="GiC12345", address="AA:BB:CC:DD:EE:FF"))
    cube.ble_client = client
    await cube.rw_handler.connect()
    await cube.move_handler.connect()
    return cube

def test_initial_state_is_read():
    async def run():
        cube = await connected_cube(FakeClient(SOLVED_FRAME + bytes([0x53])))
        assert cube.state.is_solved
        assert cube.state_string == "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"
        assert cube.projected_state.corners[0].position == (Face.D, Face.R, Face.F)
    asyncio.run(run())

def test_moves_are_dispatched():
    async def run():
        client = FakeClient(SOLVED_FRAME + bytes([0x53]))
        cube = await connected_cube(client)

        received = []
        def cb(state, move): received.append((state, move))
        await cube.move_handler.register_handler(cb)

        #The repeated initial frame isn't a move
        await client.notify(MoveHandler.BLE_CHARACT, SOLVED_FRAME + bytes([0x53]))
        assert received == []

        moved = bytes.fromhex("12345678 33333333 123456789abc 8000 31 53")
        await client.notify(MoveHandler.BLE_CHARACT, moved)
        assert len(received) == 1
        state, move = received[0]
        assert move.notation == "L"
        assert state.edge_orientations[0]
        assert cube.state is state

        #The same frame again is a real notification now
        await client.notify(MoveHandler.BLE_CHARACT, moved)
        assert len(received) == 2

        await cube.move_handler.unregister_handler(cb)
        await client.notify(MoveHandler.BLE_CHARACT, SOLVED_FRAME + bytes([0x33]))
        assert len(received) == 2
        assert cube.state.is_solved
    asyncio.run(run())

def test_bad_frames_are_dropped():
    async def run():
        client = FakeClient(SOLVED_FRAME)
        cube = await connected_cube(client)

        received = []
        await cube.move_handler.register_handler(lambda st, mv: received.append(mv))

        await client.notify(MoveHandler.BLE_CHARACT, SOLVED_FRAME[:10])
        await client.notify(MoveHandler.BLE_CHARACT, bytes.fromhex("21345678 33333333 123456789abc 0000 07"))
        assert received == []
        assert cube.state.is_solved
    asyncio.run(run())

@pytest.mark.parametrize("resp, level, charge_state", [
    (bytes([0xb5, 87, 0x03]), 87, BatteryInfo.ChargeState.NOT_CHARGING),
    (bytes([0xb5, 120, 0x03]), 100, BatteryInfo.ChargeState.NOT_CHARGING),
    (bytes([0xb5, 100, 0x02]), 99, BatteryInfo.ChargeState.CHARGING),
    (bytes([0xb5, 42, 0x01]), 100, BatteryInfo.ChargeState.FULLY_CHARGED),
])
def test_query_battery(resp, level, charge_state):
    async def run():
        cube = await connected_cube(FakeClient(SOLVED_FRAME, { 0xb5: resp }))
        assert await cube.query_battery() == BatteryInfo(level, charge_state)
    asyncio.run(run())

def test_query_num_moves():
    async def run():
        client = FakeClient(SOLVED_FRAME, { 0xcc: bytes([0xcc, 0x00, 0x01, 0x02, 0x03]) })
        cube = await connected_cube(client)
        assert await cube.query_num_moves() == 0x010203
        assert client.writes == [bytes([0xcc])]
    asyncio.run(run())

def test_unexpected_responses_are_ignored():
    async def run():
        client = FakeClient(SOLVED_FRAME, { 0xb5: bytes([0xb5, 50, 0x03]) })
        cube = await connected_cube(client)
        await client.notify(RWHandler.BLE_CHARACT_RESP, bytes([0xb8, 0xa0]))
        await client.notify(RWHandler.BLE_CHARACT_RESP, bytes([0xcc, 0, 0, 0, 1]))
        assert (await cube.query_battery()).level == 50
    asyncio.run(run())

def test_reset_commands():
    async def run():
        client = FakeClient(SOLVED_FRAME)
        cube = await connected_cube(client)
        await cube.reset_solved()
        await cube.reset_custom()
        assert client.writes == [bytes([0xa1]), bytes([0xa4])]
    asyncio.run(run())

def test_commands_without_response_are_rejected():
    async def run():
        cube = await connected_cube(FakeClient(SOLVED_FRAME))
        with pytest.raises(ValueError):
            await cube.rw_handler.send_rw_command(bytes([0xa1]))
    asyncio.run(run())

@pytest.mark.parametrize("name, local_name, uuids, expected", [
    ("GiC12345", None, [], True),
    ("Hi-G-12DRL", None, [], True),
    (None, None, ["0000AADB-0000-1000-8000-00805F9B34FB"], True),
    ("GAN-1234", "GAN-1234", ["0000fff0-0000-1000-8000-00805f9b34fb"], False),
    (None, None, [], False),
])
def test_is_cube_advertisement(name, local_name, uuids, expected):
    dev = types.SimpleNamespace(name=name, address="AA:BB:CC:DD:EE:FF")
    ad_data = types.SimpleNamespace(local_name=local_name, service_uuids=uuids)
    assert is_cube_advertisement(dev, ad_data) == expected

def test_initial_move_backlog_is_not_decoded():
    async def run():
        client = FakeClient(SOLVED_FRAME + bytes([0x53, 0x00, 0x00, 0x00]))
        cube = await connected_cube(client)
        assert cube.state.is_solved

        received = []
        await cube.move_handler.register_handler(lambda st, mv: received.append(mv))
        await client.notify(MoveHandler.BLE_CHARACT, SOLVED_FRAME + bytes([0x53, 0x00, 0x00, 0x00]))
        assert received == []
    asyncio.run(run())

def test_initial_state_with_bad_orientation_fails_connect():
    async def run():
        with pytest.raises(NibbleDomainError):
            await connected_cube(FakeClient(bytes.fromhex("12345678 33330333 123456789abc 0000")))
    asyncio.run(run())

async def pending_battery_query(cube: CubeDevice) -> asyncio.Future:
    task = asyncio.ensure_future(cube.query_battery())
    for _ in range(3): await asyncio.sleep(0)
    assert not task.done()
    return task

def test_disconnect_fails_pending_requests():
    async def run():
        client = FakeClient(SOLVED_FRAME)
        cube = await connected_cube(client)
        task = await pending_battery_query(cube)

        await cube.disconnect()
        with pytest.raises(ConnectionError):
            await task

        #A later response goes to the next request, not the failed one
        client.responses[0xb5] = bytes([0xb5, 64, 0x03])
        cube.ble_client = client
        assert (await cube.query_battery()).level == 64
    asyncio.run(run())

def test_lost_connection_fails_pending_requests():
    async def run():
        client = FakeClient(SOLVED_FRAME)
        cube = await connected_cube(client)
        task = await pending_battery_query(cube)

        cube._on_disconnect(client)
        assert cube.ble_client is None
        with pytest.raises(ConnectionError):
            await task
    asyncio.run(run())
