#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * SP - Stack pointer
    * PC - Program counter (before the instruction ran)
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of:
    * Stack - Stack contents

A ROM can also be listed as address/word pairs without running it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import PROGRAM_START
from .words import merge_bytes


class Debugger:
    def __init__(self, stream=None):
        self.live = False
        self.stream = stream  # None means stdout

    def debug(self, cpu, instruction, verbose=False):
        state = cpu.state
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} SP: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[state.v[reg_num] for reg_num in range(15, -1, -1)] +
            [state.i, state.sp, cpu.debug_pc, cpu.opcode, instruction]
        )

        if verbose:
            stack_items = cpu.stack.get_items(state)
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += ("\nStack:{}").format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def write(self, line):
        print(line, file=self.stream)

    def output(self, cpu, instruction):
        self.write(self.debug(cpu, instruction))

    def report_crash(self, cpu, error):
        self.write("Emulation halted: {}".format(error))
        self.write(self.debug(cpu, "???", verbose=True))

    def list_program(self, data, location=PROGRAM_START):
        # A trailing odd byte can't form an instruction, so it is skipped
        for offset in range(0, len(data) - 1, 2):
            self.write("{:03x}> {:04x}".format(location + offset, merge_bytes(data[offset], data[offset + 1])))
