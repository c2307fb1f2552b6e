from puzzlehash.bech import PUZZLE_HASH_LEN
from puzzlehash.exceptions import InvalidLengthError


def parse_hex(text: str) -> bytes:
  """Puzzle hash from 64 hex digits, with optional 0x prefix and surrounding whitespace."""
  text = text.strip()
  if text[:2].lower() == "0x":
    text = text[2:]
  if len(text) != 2 * PUZZLE_HASH_LEN:
    raise InvalidLengthError(f"Puzzle hash must be {PUZZLE_HASH_LEN} bytes ({2 * PUZZLE_HASH_LEN} hex characters)")
  try:
    return bytes.fromhex(text)
  except ValueError:
    raise ValueError("Puzzle hash is not valid hex") from None


def format_hex(data: bytes, prefix=True) -> str:
  return f"0x{data.hex()}" if prefix else data.hex()
