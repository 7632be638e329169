#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "ChocChip Core"
APP_VERSION = "0.1.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Machine layout.  Everything below the program start is reserved for the interpreter and fonts
MEM_SIZE = 0x1000
NUM_REGISTERS = 0x10
PROGRAM_START = 0x200
STACK_DEPTH = 16

# Number of instructions executed when no limit is given on the command line
DEFAULT_CYCLES = 100

# CPU quirks, all overridable from the command line
CPU_QUIRKS = ["stack", "block"]
