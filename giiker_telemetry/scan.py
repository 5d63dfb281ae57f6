import asyncio, logging, typing, bleak
from . import log
from .cube import CubeDevice

def is_cube_advertisement(dev: bleak.BLEDevice, ad_data: bleak.AdvertisementData) -> bool:
    name = ad_data.local_name or dev.name or ""
    if name.startswith(CubeDevice.BLE_NAME_PREFIXES): return True

    #Some firmwares advertise no name, but still list the cube's services
    return any(u.lower() in CubeDevice.BLE_SERVICES for u in ad_data.service_uuids)

def scan_for_cube_devices(cube_discover_cb: typing.Callable[[CubeDevice], typing.Optional[typing.Awaitable[None]]]) -> bleak.BleakScanner:
    cube_addrs = set()
    cube_lock = asyncio.Lock()

    async def ble_discover_cb(dev: bleak.BLEDevice, ad_data: bleak.AdvertisementData):
        async with cube_lock:
            if dev.address in cube_addrs or not is_cube_advertisement(dev, ad_data): return
            cube_addrs.add(dev.address)

            #Hand the new cube to the discover callback
            task = cube_discover_cb(CubeDevice(dev))
            if task: await task

    return bleak.BleakScanner(ble_discover_cb)

async def scan_for_cube(timeout: typing.Optional[float] = None) -> CubeDevice:
    found_cube = None
    found_cube_evt = asyncio.Event()

    def discover_cb(cube: CubeDevice):
        nonlocal found_cube
        if found_cube: return

        log.LOGGER.log(logging.INFO, f"Discovered GiiKER cube {cube}")
        found_cube = cube
        found_cube_evt.set()

    #Run the scan until we discover a cube
    async with scan_for_cube_devices(discover_cb): await asyncio.wait_for(found_cube_evt.wait(), timeout)

    return found_cube
