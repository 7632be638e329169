#!/usr/bin/env python3

"""
Null Display Plugin

The core does not render anything.  CLS and DRW are forwarded here so a real
display can be plugged in later by subclassing this.  This class can be used
on its own if no display is needed: nothing is drawn and sprites never
collide.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Display:
    def clear(self):
        pass

    def draw_sprite(self, sprite, x, y):  # pylint: disable=unused-argument
        # sprite holds one byte (8 pixels wide) per row.  Return True if any set pixel was unset by the XOR.
        return False
