"""Byte sequences a terminal sends for common keys."""

UP = "\x1b[A"
DOWN = "\x1b[B"
RIGHT = "\x1b[C"
LEFT = "\x1b[D"
HOME = "\x1b[H"
END = "\x1b[F"
INSERT = "\x1b[2~"
DELETE = "\x1b[3~"
PAGE_UP = "\x1b[5~"
PAGE_DOWN = "\x1b[6~"
ESC = "\x1b"
CR = "\r"
NEW_LINE = "\n"
CR_NL = "\r\n"
BACKSPACE = "\x7f"
TAB = "\t"
SPACE = " "
CTRL_C = "\x03"
CTRL_D = "\x04"
CTRL_A = "\x01"
CTRL_E = "\x05"
CTRL_F = "\x06"
CTRL_B = "\x02"
CTRL_N = "\x0e"
CTRL_P = "\x10"
CTRL_H = "\x08"
CTRL_L = "\x0c"
CTRL_K = "\x0b"
CTRL_U = "\x15"
CTRL_W = "\x17"
CTRL_T = "\x14"
CTRL_Y = "\x19"
CTRL_X = "\x18"
CTRL_Z = "\x1a"
CTRL_Q = "\x11"
CTRL_S = "\x13"
CTRL_O = "\x0f"
CTRL_R = "\x12"
CTRL_V = "\x16"
CTRL_G = "\x07"
CTRL_J = "\x0a"
CTRL_M = "\x0d"