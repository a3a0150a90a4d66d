# assembler.py
import re
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from errors import AssemblyError, MalformedLine, UnknownMnemonic, ValueOutOfRange
from logger import logger
from mnemonics import (
    NO_DESTINATION,
    NO_JUMP,
    computation_bits,
    destination_bits,
    is_computation,
    is_destination,
    is_jump,
    jump_bits,
)

WORD_BITS = 16
MAX_ADDRESS = 0x7FFF    # the leading bit is reserved for computation words
C_PREFIX = 0b111

ADDRESS_MARKER = "@"
ASSIGN = "="
JUMP = ";"

LITERAL = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class AddressInstruction:
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= MAX_ADDRESS:
            raise ValueOutOfRange(self.value, MAX_ADDRESS)


@dataclass(frozen=True)
class ComputationInstruction:
    computation: str
    destination: Optional[str] = None
    jump: Optional[str] = None

    def __post_init__(self):
        if self.destination is None and self.jump is None:
            raise MalformedLine("computation stores nowhere and never jumps")
        if not is_computation(self.computation):
            raise UnknownMnemonic("computation", self.computation)
        if self.destination is not None and not is_destination(self.destination):
            raise UnknownMnemonic("destination", self.destination)
        if self.jump is not None and not is_jump(self.jump):
            raise UnknownMnemonic("jump", self.jump)


Instruction = Union[AddressInstruction, ComputationInstruction]


def _split_once(line, sep):
    head, _, tail = line.partition(sep)
    if not head or not tail:
        raise MalformedLine(f"expected text on both sides of '{sep}'")
    return head, tail


def parse_line(line: str) -> Optional[Instruction]:
    """Classify one trimmed source line.

    Returns ``None`` for a blank line. ``@value`` is an address instruction,
    anything else must be ``dest=comp`` or ``comp;jump``.
    """
    if not line:
        return None

    if line.startswith(ADDRESS_MARKER):
        literal = line[len(ADDRESS_MARKER):]
        if not LITERAL.fullmatch(literal):
            # symbols and labels are resolved before this point
            raise MalformedLine(f"address '{literal}' is not a decimal literal")
        value = int(literal)
        if literal.startswith("-") and value == 0:
            raise MalformedLine(f"address '{literal}' carries a sign")
        return AddressInstruction(value)

    assigns = line.count(ASSIGN)
    jumps = line.count(JUMP)

    if assigns > 1 or jumps > 1:
        raise MalformedLine("repeated separator")
    if assigns and jumps:
        raise MalformedLine("a destination and a jump cannot share one instruction")

    if assigns:
        dest, comp = _split_once(line, ASSIGN)
        return ComputationInstruction(comp, destination=dest)
    if jumps:
        comp, jump = _split_once(line, JUMP)
        return ComputationInstruction(comp, jump=jump)

    raise MalformedLine("not an address or computation instruction")


def encode(instruction: Instruction) -> int:
    if isinstance(instruction, AddressInstruction):
        return instruction.value

    dest = NO_DESTINATION
    if instruction.destination is not None:
        dest = destination_bits(instruction.destination)

    jump = NO_JUMP
    if instruction.jump is not None:
        jump = jump_bits(instruction.jump)

    return (
        (C_PREFIX << 13)
        | (computation_bits(instruction.computation) << 6)
        | (dest << 3)
        | jump
    )


def to_binary(word: int) -> str:
    return format(word, f"0{WORD_BITS}b")


def encode_line(line: str) -> Optional[str]:
    instruction = parse_line(line)
    if instruction is None:
        return None
    return to_binary(encode(instruction))


def _translate(numbered: Tuple[int, str]):
    lineno, line = numbered
    try:
        return lineno, line, encode_line(line), None
    except AssemblyError as e:
        return lineno, line, None, e.at(lineno, line)


def _translate_all(lines: Iterable[str], jobs: int):
    numbered = list(enumerate(lines, start=1))
    if jobs <= 1 or len(numbered) < 2:
        results = map(_translate, numbered)
    else:
        chunksize = max(1, len(numbered) // (jobs * 4))
        with ProcessPoolExecutor(max_workers=jobs) as pool:
            # map() yields in submission order whatever order workers finish in
            results = list(pool.map(_translate, numbered, chunksize=chunksize))

    # logged here, worker processes have no handlers
    for lineno, line, word, error in results:
        if word is not None:
            logger.debug(f"{lineno:>5}  {word}  {line}")
        yield word, error


def assemble(lines: Iterable[str], jobs: int = 1) -> List[str]:
    """Encode trimmed source lines into 16-bit binary words.

    Blank lines produce no word. The first bad line raises its
    ``AssemblyError`` annotated with the line number and text.
    """
    words = []
    for word, error in _translate_all(lines, jobs):
        if error is not None:
            raise error
        if word is not None:
            words.append(word)
    return words


def diagnose(lines: Iterable[str], jobs: int = 1) -> Tuple[List[str], List[AssemblyError]]:
    """Like :func:`assemble` but collect every failing line.

    The words of a run with errors are incomplete and must not be written.
    """
    words, errors = [], []
    for word, error in _translate_all(lines, jobs):
        if error is not None:
            errors.append(error)
        elif word is not None:
            words.append(word)
    return words, errors


def join_words(words: Iterable[str]) -> str:
    return "\n".join(words)


if __name__ == "__main__":
    asm = """
    @2
    D=A
    @3
    D=D+A
    @0
    M=D
    """

    code = assemble(line.strip() for line in asm.splitlines())

    print("BINARY:")
    print(join_words(code))
