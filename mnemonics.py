# mnemonics.py
#
# Bit layout of a computation word:
#
#   1 1 1 a  c1 c2 c3 c4  c5 c6 d1 d2  d3 j1 j2 j3
#         |  zD nD zA nA  f  no A  D   M  lt eq gt
#         A/M selector
from types import MappingProxyType

from errors import UnknownMnemonic

# ALU function bits, keyed by the A-register form of each computation.
# The M forms reuse these patterns and only set the selector bit.
COMPUTATIONS = MappingProxyType({
    "0":   0b101010,
    "1":   0b111111,
    "-1":  0b111010,
    "D":   0b001100,
    "A":   0b110000,
    "!D":  0b001101,
    "!A":  0b110001,
    "-D":  0b001111,
    "-A":  0b110011,
    "D+1": 0b011111,
    "A+1": 0b110111,
    "D-1": 0b001110,
    "A-1": 0b110010,
    "D+A": 0b000010,
    "D-A": 0b010011,
    "A-D": 0b000111,
    "D&A": 0b000000,
    "D|A": 0b010101,
})

# store enables, A D M
DESTINATIONS = MappingProxyType({
    "M":   0b001,
    "D":   0b010,
    "MD":  0b011,
    "A":   0b100,
    "AM":  0b101,
    "AD":  0b110,
    "AMD": 0b111,
})

# lt eq gt, compared against zero
JUMPS = MappingProxyType({
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
})

NO_DESTINATION = 0b000
NO_JUMP = 0b000

MEMORY = "M"
ACCUMULATOR = "A"


def _normalize(mnemonic):
    # "D+M" -> "D+A"; a mnemonic naming both registers has no A form
    if MEMORY in mnemonic and ACCUMULATOR not in mnemonic:
        return mnemonic.replace(MEMORY, ACCUMULATOR), 1
    return mnemonic, 0


def is_computation(mnemonic):
    key, _ = _normalize(mnemonic)
    return MEMORY not in key and key in COMPUTATIONS


def is_destination(mnemonic):
    return mnemonic in DESTINATIONS


def is_jump(mnemonic):
    return mnemonic in JUMPS


def computation_bits(mnemonic):
    """Return the 7-bit ``a c1..c6`` field for a computation mnemonic.

    The leading bit selects the second ALU operand: 1 for the addressed
    memory cell ``M``, 0 for the ``A`` register.
    """
    if not is_computation(mnemonic):
        raise UnknownMnemonic("computation", mnemonic)
    key, selector = _normalize(mnemonic)
    return (selector << 6) | COMPUTATIONS[key]


def destination_bits(mnemonic):
    if not is_destination(mnemonic):
        raise UnknownMnemonic("destination", mnemonic)
    return DESTINATIONS[mnemonic]


def jump_bits(mnemonic):
    if not is_jump(mnemonic):
        raise UnknownMnemonic("jump", mnemonic)
    return JUMPS[mnemonic]
