import asyncio, aioconsole, logging, giiker_telemetry, argparse

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("-t", "--timeout", type=float, default=25.0, help="Connection timeout in seconds")
parser.add_argument("--decode", metavar="HEX", help="Decode a captured state frame instead of connecting to a cube")
args = parser.parse_args()

if args.debug: giiker_telemetry.LOGGER.setLevel(logging.DEBUG)

def print_state(state: giiker_telemetry.CubeState):
    projected = giiker_telemetry.project_state(state)
    for p in projected.corners + projected.edges:
        print(f"    {''.join(f.value for f in p.position):3s} {' '.join(c.value for c in p.colors)}")

    facelets = giiker_telemetry.to_facelet_string(projected)
    print(f"facelets: {facelets}")
    print(f"solved:   {giiker_telemetry.is_solved_string(facelets)}")

def decode_capture(hex_frame: str):
    frame = giiker_telemetry.decode_frame(bytes.fromhex(hex_frame))
    print(f"state:    {frame.state}")
    print(f"moves:    {' '.join(str(m) for m in frame.moves) or '-'}")
    print_state(frame.state)

async def command_loop(cube: giiker_telemetry.CubeDevice):
    while True:
        cmd = (await aioconsole.ainput("> ")).strip().lower()
        if cmd == "h" or cmd == "help":
            print("(h)elp:  Shows this help text")
            print("(q)uit:  Exits the demo")
            print("(i)nfo:  Shows information about the connected cube")
            print("(m)oves: Shows moves being made in real time")
            print("(s)tate: Shows the colors of every piece and the facelet string")
            print("(r)eset: Resets the cube's state to solved")
            print("(d)ebug: Toggles debug logging")
        elif cmd == "q" or cmd == "quit":
            print("Exiting...")
            break
        elif cmd == "i" or cmd == "info":
            print(f"battery:    {await cube.query_battery()}")
            print(f"#moves:     {await cube.query_num_moves()}")
        elif cmd == "m" or cmd == "moves":
            def move_cb(state: giiker_telemetry.CubeState, move: giiker_telemetry.Move):
                print(f"MOVE | {giiker_telemetry.state_string(state)} | {move}")

            await cube.move_handler.register_handler(move_cb)
            await aioconsole.ainput("Press ENTER to stop\n")
            await cube.move_handler.unregister_handler(move_cb)
        elif cmd == "s" or cmd == "state":
            print_state(cube.state)
        elif cmd == "r" or cmd == "reset":
            await cube.reset_solved()
            print("Reset the cube to its solved state")
        elif cmd == "d" or cmd == "debug":
            if giiker_telemetry.LOGGER.level != logging.DEBUG:
                giiker_telemetry.LOGGER.setLevel(logging.DEBUG)
                print("Enabled debug logging")
            else:
                giiker_telemetry.LOGGER.setLevel(logging.INFO)
                print("Disabled debug logging")
        else: print("Unknown command")

async def main():
    #Scan for a cube
    print("Scanning for cube...")
    cube = await giiker_telemetry.scan_for_cube()
    print(f"Found cube: {cube}")

    #Connect to the cube
    await cube.connect(timeout=args.timeout)
    try:
        print("Connected to cube:")
        print(f"    battery:    {await cube.query_battery()}")
        print(f"    #moves:     {await cube.query_num_moves()}")
        print(f"    facelets:   {cube.state_string}")

        await command_loop(cube)
    finally:
        #Disconnect from the cube
        await cube.disconnect()

if args.decode: decode_capture(args.decode)
else: asyncio.run(main())
