#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the interpreter, replacing args with a
dictionary of options.  This can be done via the Terminal or another script.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, CPU_QUIRKS, DEFAULT_CYCLES, PROGRAM_START, STACK_DEPTH
from .cpu import CPU, HALTING_ERRORS
from .debugger import Debugger
from .display import Display
from .hostio import Loader
from .stack import RAMStack, Stack
from .state import MachineState


def quirk_option(args, quirk):
    quirk_setting = args["{}_quirks".format(quirk)]
    return None if quirk_setting is None else bool(quirk_setting)


def main(args):
    # Returns 0 if the run finished, 1 if the program was halted by an error
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    quirk_settings = {quirk: quirk_option(args, quirk) for quirk in CPU_QUIRKS}

    # Read ROM binary
    program = Loader().load_binary(args["filename"])

    debugger = Debugger()
    debugger.set_live(args["debug"])

    if args["list"]:
        debugger.list_program(program, PROGRAM_START)
        return 0

    # Allocate default memory and write the ROM at the program start
    state = MachineState()
    state.load_program(program, PROGRAM_START)

    # Return addresses live outside RAM unless stack quirks are requested
    stack = RAMStack() if quirk_settings["stack"] else Stack(STACK_DEPTH)

    # Create a new CPU, plug it into the rest of the system, and boot it up at the default address
    cpu = CPU(state, stack, Display(), debugger, block_quirks=quirk_settings["block"])
    cycles = DEFAULT_CYCLES if args["cycles"] is None else args["cycles"]

    try:
        cpu.run(PROGRAM_START, max_cycles=cycles or None)
    except HALTING_ERRORS:
        # The crash report has already been written by the CPU
        return 1

    return 0
