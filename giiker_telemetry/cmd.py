#Single-byte requests written to the info request characteristic
CMD_RESET_SOLVED = 0xa1
CMD_RESET_CUSTOM = 0xa4
CMD_GET_BATTERY = 0xb5
CMD_GET_ALL_STEP = 0xcc

#Commands the cube answers on the info response characteristic
CMDS = [CMD_GET_BATTERY, CMD_GET_ALL_STEP]
