#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8 subset)

Fetches, decodes and executes one instruction at a time against a
MachineState.  Only part of the CHIP-8 instruction set is emulated.  Anything
else stops the run with UnrecognizedInstructionError, because skipping an
unknown instruction would leave every following fetch misaligned.

Each instruction moves the program counter itself: most advance by 2, skips
by 2 or 4, and jumps, calls and returns set it outright.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, NUM_REGISTERS
from .ram import RAMError
from .stack import StackError
from .state import StateError
from .words import split_fields, to_bcd


class CPUError(Exception):
    pass


class UnrecognizedInstructionError(CPUError):
    def __init__(self, opcode, pc):
        super().__init__(
            "{}Opcode 0x{:04x} at address 0x{:03x} is not emulated.".format(APP_INTRO, opcode, pc)
        )
        self.opcode = opcode
        self.pc = pc


# Everything that can stop a run
HALTING_ERRORS = (CPUError, RAMError, StateError, StackError)


class CPU:
    def __init__(self, state, stack, display, debugger, block_quirks=None):
        self.state = state
        self.stack = stack
        self.display = display
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()

        """
        Quirks
        ------

        - Block quirks: Enabled by default.  Fx55/Fx65 transfer all 16 registers instead of V0 to Vx.
        """

        self.block_quirks = True if block_quirks is None else block_quirks

        # Define instruction pointers.
        # n = Nibble
        # kk = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Initial lookup for instructions' first nibble
            0x0: self._0nnn,  # Alias for bitmask 0xFFFF
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xkk,
            0x4: self._4xkk,
            0x5: self._5nnn_8nnn,  # Alias for bitmask 0xF00F
            0x6: self._6xkk,
            0x7: self._7xkk,
            0x8: self._5nnn_8nnn,  # Alias for bitmask 0xF00F
            0xA: self._Annn,
            0xD: self._Dxyn,
            0xF: self._Fnnn,  # Alias for bitmask 0xF0FF
            # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            # Instructions beginning with nibble 0x5/0x8, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            # Instructions beginning with nibble 0xF, bitmask 0xF0FF
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Current opcode, its decoded fields, and where it was fetched from
        self.opcode = 0
        self.fields = split_fields(0)
        self.debug_pc = self.state.pc

    def run(self, start_location=None, max_cycles=None):
        # Returns the number of instructions executed.  Errors are reported here, then passed on.
        if start_location is not None:
            self.state.pc = start_location

        cycles = 0

        try:
            while max_cycles is None or cycles < max_cycles:
                self.step()
                cycles += 1
        except HALTING_ERRORS as error:
            self.debugger.report_crash(self, error)
            raise

        return cycles

    def step(self):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.state.pc
        self.opcode = self.fetch()
        self.decode_exec()

    def fetch(self):
        return self.state.read_word(self.state.pc)

    def _call_masked_instruction(self, masked_opcode):
        instruction = self.instructions.get(masked_opcode)

        if instruction is None:
            self._opcode_unsupported()

        instruction()

    def decode_exec(self):
        self.fields = split_fields(self.opcode)
        self._call_masked_instruction(self.fields.op)

    def inc_pc(self):
        self.state.pc += 2

    def _opcode_unsupported(self):
        raise UnrecognizedInstructionError(self.opcode, self.debug_pc)

    def debug(self, instruction):
        self.debugger.output(self, instruction)

    def _0nnn(self):
        opcode = self.opcode

        if opcode < 0x10:
            # Opcodes 0x0 - 0xF are used internally for indexing, so they can't be looked up directly
            self._opcode_unsupported()

        self._call_masked_instruction(opcode)

    def _5nnn_8nnn(self):
        self._call_masked_instruction(self.opcode & 0xF00F)

    def _Fnnn(self):
        self._call_masked_instruction(self.opcode & 0xF0FF)

    def _00E0(self):  # CLS
        if self.live_debug:
            self.debug("CLS")

        self.display.clear()
        self.inc_pc()

    def _00EE(self):  # RET
        if self.live_debug:
            self.debug("RET")

        self.state.pc = self.stack.pop(self.state)

    def _1nnn(self):  # JP addr
        if self.live_debug:
            self.debug("JP 0x{:03x}".format(self.fields.nnn))

        self.state.pc = self.fields.nnn

    def _2nnn(self):  # CALL addr
        if self.live_debug:
            self.debug("CALL 0x{:03x}".format(self.fields.nnn))

        # Save the address after this CALL, so RET carries on from the next instruction
        self.stack.push(self.state, self.state.pc + 2)
        self.state.pc = self.fields.nnn

    def _skip_if(self, condition):
        self.inc_pc()

        if condition:
            self.inc_pc()

    def _3xkk(self):  # SE Vx, byte
        fields = self.fields

        if self.live_debug:
            self.debug("SE V{:01x}, 0x{:02x}".format(fields.x, fields.kk))

        self._skip_if(self.state.read_register(fields.x) == fields.kk)

    def _4xkk(self):  # SNE Vx, byte
        fields = self.fields

        if self.live_debug:
            self.debug("SNE V{:01x}, 0x{:02x}".format(fields.x, fields.kk))

        self._skip_if(self.state.read_register(fields.x) != fields.kk)

    def _5xy0(self):  # SE Vx, Vy
        fields = self.fields

        if self.live_debug:
            self.debug("SE V{:01x}, V{:01x}".format(fields.x, fields.y))

        state = self.state
        self._skip_if(state.read_register(fields.x) == state.read_register(fields.y))

    def _6xkk(self):  # LD Vx, byte
        fields = self.fields

        if self.live_debug:
            self.debug("LD V{:01x}, 0x{:02x}".format(fields.x, fields.kk))

        self.state.write_register(fields.x, fields.kk)
        self.inc_pc()

    def _7xkk(self):  # ADD Vx, byte
        fields = self.fields

        if self.live_debug:
            self.debug("ADD V{:01x}, 0x{:02x}".format(fields.x, fields.kk))

        # Wraps at 8 bits.  Vf is not touched, unlike ADD Vx, Vy
        self.state.write_register(fields.x, self.state.read_register(fields.x) + fields.kk)
        self.inc_pc()

    def _8xy0(self):  # LD Vx, Vy
        fields = self.fields

        if self.live_debug:
            self.debug("LD V{:01x}, V{:01x}".format(fields.x, fields.y))

        self.state.write_register(fields.x, self.state.read_register(fields.y))
        self.inc_pc()

    def _8xy1(self):  # OR Vx, Vy
        fields = self.fields

        if self.live_debug:
            self.debug("OR V{:01x}, V{:01x}".format(fields.x, fields.y))

        state = self.state
        state.write_register(fields.x, state.read_register(fields.x) | state.read_register(fields.y))
        self.inc_pc()

    def _Annn(self):  # LD I, addr
        if self.live_debug:
            self.debug("LD I, 0x{:03x}".format(self.fields.nnn))

        self.state.i = self.fields.nnn
        self.inc_pc()

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        # Drawing is left to the display.  The sprite is n bytes (rows of 8 pixels) starting at I.
        fields = self.fields

        if self.live_debug:
            self.debug("DRW V{:01x}, V{:01x}, 0x{:01x}".format(fields.x, fields.y, fields.n))

        state = self.state
        sprite = bytes(state.ram.read_block(state.i, fields.n))
        collided = self.display.draw_sprite(sprite, state.read_register(fields.x), state.read_register(fields.y))
        state.write_register(0xF, int(bool(collided)))
        self.inc_pc()

    def _Fx33(self):  # LD B, Vx
        if self.live_debug:
            self.debug("LD B, V{:01x}".format(self.fields.x))

        state = self.state
        i = state.i

        for offset, digit in enumerate(to_bcd(state.read_register(self.fields.x))):
            state.write_byte(i + offset, digit)

        self.inc_pc()

    def _block_registers(self):
        return range(NUM_REGISTERS) if self.block_quirks else range(self.fields.x + 1)

    def _Fx55(self):  # LD [I], Vx
        if self.live_debug:
            self.debug("LD [I], V{:01x}".format(self.fields.x))

        state = self.state
        i = state.i

        for reg in self._block_registers():
            state.write_byte(i + reg, state.read_register(reg))

        self.inc_pc()

    def _Fx65(self):  # LD Vx, [I]
        if self.live_debug:
            self.debug("LD V{:01x}, [I]".format(self.fields.x))

        state = self.state
        i = state.i

        for reg in self._block_registers():
            state.write_register(reg, state.read_byte(i + reg))

        self.inc_pc()
