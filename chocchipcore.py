#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "0.1.0"

import sys
from argparse import ArgumentParser
from cccore import main
from cccore.constants import CPU_QUIRKS, DEFAULT_CYCLES


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-n", "--cycles", type=int,
        help="number of instructions to execute (default {}, 0 = run until halted)".format(DEFAULT_CYCLES)
    )
    parser.add_argument(
        "-l", "--list", action="store_true", default=False,
        help="print the ROM as address/instruction pairs instead of running it"
    )

    for cpu_quirk in CPU_QUIRKS:
        parser.add_argument(
            "--{}_quirks".format(cpu_quirk), type=int, choices=[0, 1],
            help="manually disable or enable {} quirks".format(cpu_quirk)
        )

    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output, one line per instruction executed"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the interpreter from another script by calling this with a dictionary
    sys.exit(main(args))
