import sys
import argparse
from typing import Optional, TextIO

__version__ = "1.0"

# ASCII letter bounds: A(65)..Z(90), a(97)..z(122)
UPPERCASE_FLOOR = 65
UPPERCASE_CEILING = 90
LOWERCASE_FLOOR = 97
LOWERCASE_CEILING = 122
CASE_DISTANCE = 32
ALPHABET_SIZE = 26

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  ERRORS
# ==========================================

class CipherError(Exception):
    """Base class for every failure reported by the engine."""


class NullOperandError(CipherError):
    """
    An operand handle was absent (None) when a component needed it.

    Subclasses fix which operands were missing; the message names the
    component and every missing operand.
    """

    operands = ()

    def __init__(self, component: str):
        self.component = component
        verb = "was" if len(self.operands) == 1 else "were"
        super().__init__(f"[{component}] {' and '.join(self.operands)} {verb} missing")


class NullKeyError(NullOperandError):
    operands = ("key",)


class NullPlainTextError(NullOperandError):
    operands = ("plain text",)


class NullPlainTextAndKeyError(NullPlainTextError, NullKeyError):
    operands = ("plain text", "key")


class EmptyKeyError(CipherError):
    """The normalized key has no letters left to cycle through."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"[{component}] key has no letters after normalization")


class InputReadError(CipherError):
    """A line of input could not be obtained."""

# ==========================================
#  ALPHABET CLASSIFIER
# ==========================================

def is_uppercase(c: str) -> bool:
    return UPPERCASE_FLOOR <= ord(c) <= UPPERCASE_CEILING

def is_lowercase(c: str) -> bool:
    return LOWERCASE_FLOOR <= ord(c) <= LOWERCASE_CEILING

def in_bounds(c: str) -> bool:
    """True if c is an ASCII letter of either case."""
    return is_uppercase(c) or is_lowercase(c)

def floor_of(c: str) -> int:
    """
    Lowest code point of the case c belongs to.

    Anything that is not lowercase gets the uppercase floor, so callers
    must check in_bounds(c) first.
    """
    return LOWERCASE_FLOOR if is_lowercase(c) else UPPERCASE_FLOOR

# ==========================================
#  ROTATION ENGINE
# ==========================================

def rotate(plain: str, key_char: str) -> str:
    """
    Shift one letter by the alphabet offset of a key letter (ROT / Caesar).

    Both letters are taken as 0-25 offsets from their own case floor. The
    result is always placed back in the case of `plain`; the case of
    `key_char` has no effect. Both arguments must satisfy in_bounds().
    """
    plain_floor = floor_of(plain)
    key_floor = floor_of(key_char)
    offset = (ord(plain) - plain_floor) + (ord(key_char) - key_floor)
    return chr(offset % ALPHABET_SIZE + plain_floor)

# ==========================================
#  KEY NORMALIZER
# ==========================================

def normalize(raw_key: Optional[str]) -> str:
    """
    Reduce a raw key to lowercase ASCII letters.

    Non-letters are dropped (the key shortens) and uppercase letters are
    lowered; the order of the remaining letters is kept. A key with no
    letters normalizes to "" without error.
    """
    if raw_key is None:
        raise NullKeyError("normalize")

    key = "".join(
        chr(ord(c) + CASE_DISTANCE) if is_uppercase(c) else c
        for c in raw_key if in_bounds(c)
    )

    dropped = len(raw_key) - len(key)
    if dropped:
        log_warn(f"Dropped {dropped} non-letter character(s) from the key.")
    return key

# ==========================================
#  CIPHER ENGINE
# ==========================================

def encipher(plain_text: Optional[str], key: Optional[str]) -> str:
    """
    Encipher plain_text with the Vigenère cipher, cycling through key.

    The key cursor advances on every position, letters or not, so
    punctuation and spaces consume key letters too. Non-letters are copied
    through unchanged and the output has the length of the input.

    Raises NullPlainTextError / NullKeyError for absent operands (a single
    NullPlainTextAndKeyError when both are absent) and EmptyKeyError when
    key is "".
    """
    if plain_text is None and key is None:
        raise NullPlainTextAndKeyError("encipher")
    if plain_text is None:
        raise NullPlainTextError("encipher")
    if key is None:
        raise NullKeyError("encipher")
    if not key:
        raise EmptyKeyError("encipher")

    log_info(f"Enciphering {len(plain_text)} character(s) with a key of {len(key)} letter(s).")

    result = []
    cursor = 0
    key_length = len(key)
    for char in plain_text:
        if cursor == key_length:
            cursor = 0
        if in_bounds(char):
            result.append(rotate(char, key[cursor]))
        else:
            result.append(char)
        cursor += 1
    return "".join(result)

# ==========================================
#  LINE INPUT
# ==========================================

def read_line(prompt: str, stream: TextIO = None, out: TextIO = None) -> str:
    """
    Prompt on `out` and read one line from `stream`.

    The trailing newline is stripped; a last line without one is returned
    as is. Raises InputReadError on end-of-stream, read failures and Ctrl+C.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out

    out.write(prompt)
    out.flush()
    try:
        line = stream.readline()
    except KeyboardInterrupt:
        raise InputReadError("input interrupted") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"could not read input: {e}") from e

    if not line:
        raise InputReadError(f"end of input reached at prompt {prompt.strip()!r}")
    if line.endswith("\n"):
        line = line[:-1]
    return line

# ==========================================
#  CLI LOGIC
# ==========================================

def main(argv=None):
    global VERBOSE

    parser = argparse.ArgumentParser(
        prog="vigenere-engine",
        description="Interactive Vigenère cipher: prompts for a password and a line of plain text."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")
    args = parser.parse_args(argv)

    VERBOSE = args.verbose

    try:
        raw_key = read_line("Password: ")
        plain_text = read_line("Plain text: ")
        key = normalize(raw_key)
        result = encipher(plain_text, key)
    except CipherError as e:
        sys.exit(f"Error: {e}")

    print(f"\n{result}")

if __name__ == "__main__":
    main()
