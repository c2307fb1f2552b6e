"""Bech32m encoding of 32-byte puzzle hashes, e.g. xch1pwrzyy35qxk0rz76jl0648fvt6ql905vwd7zs0scjqant5sf25lql4hz3z"""

from puzzlehash.exceptions import (
  ChecksumMismatchError, InvalidCharacterError, InvalidLengthError, InvalidPrefixError, MissingSeparatorError,
  PaddingError
)

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
BECH32M_CONST = 0x2BC830A3
SEPARATOR = "1"
CHECKSUM_LEN = 6
PUZZLE_HASH_LEN = 32
KNOWN_PREFIXES = ("xch", "txch", "nft", "did")


def pack8to5(data) -> list:
  """Regroup bytes into 5-bit groups, zero-padding the last group."""
  acc = bits = 0
  ret = []
  for byte in data:
    acc = (acc << 8 | byte) & 0xFFF
    bits += 8
    while bits >= 5:
      bits -= 5
      ret.append((acc >> bits) & 31)
  if bits:
    ret.append((acc << 5 - bits) & 31)
  return ret


def unpack5to8(groups) -> bytes:
  """Regroup 5-bit groups into bytes. Leftover padding must be less than five zero bits."""
  acc = bits = 0
  ret = bytearray()
  for group in groups:
    if group < 0 or group >> 5:
      raise ValueError(f"Invalid 5-bit group value {group}")
    acc = (acc << 5 | group) & 0xFFF
    bits += 5
    while bits >= 8:
      bits -= 8
      ret.append((acc >> bits) & 255)
  if bits >= 5:
    raise PaddingError(f"Invalid padding in address data: {bits} leftover bits")
  if acc & (1 << bits) - 1:
    raise PaddingError("Invalid padding in address data: non-zero padding bits")
  return bytes(ret)


def expand_prefix(prefix: str) -> list:
  """Expand the prefix into values for checksum computation."""
  return [ord(x) >> 5 for x in prefix] + [0] + [ord(x) & 31 for x in prefix]


def polymod(values) -> int:
  """Internal function that computes the Bech32 checksum."""
  chk = 1
  for value in values:
    top = chk >> 25
    chk = (chk & 0x1FFFFFF) << 5 ^ value
    for i in range(5):
      chk ^= GENERATOR[i] if ((top >> i) & 1) else 0
  return chk


def create_checksum(prefix: str, data: list) -> list:
  """Compute the checksum values given prefix and data."""
  p = polymod(expand_prefix(prefix) + data + [0] * CHECKSUM_LEN) ^ BECH32M_CONST
  return [(p >> 5 * (5-i)) & 31 for i in range(CHECKSUM_LEN)]


def verify_checksum(prefix: str, data: list) -> bool:
  """Verify a checksum given prefix and the data values including the checksum."""
  return polymod(expand_prefix(prefix) + data) == BECH32M_CONST


def normalize_prefix(prefix: str) -> str:
  prefix = prefix.lower()
  if not prefix:
    raise InvalidPrefixError("Address prefix must not be empty")
  if any(ord(x) < 33 or ord(x) > 126 for x in prefix):
    raise InvalidPrefixError(f"Invalid address prefix {prefix!r}: only printable ASCII is allowed")
  return prefix


def encode(puzzle_hash: bytes, prefix: str = "xch") -> str:
  """Encode a 32-byte puzzle hash as a Bech32m address with the given prefix."""
  puzzle_hash = bytes(puzzle_hash)
  if len(puzzle_hash) != PUZZLE_HASH_LEN:
    raise InvalidLengthError(f"Puzzle hash must be {PUZZLE_HASH_LEN} bytes, got {len(puzzle_hash)}")
  prefix = normalize_prefix(prefix)
  data = pack8to5(puzzle_hash)
  combined = data + create_checksum(prefix, data)
  return prefix + SEPARATOR + "".join([CHARSET[d] for d in combined])


# Decoding stages, run by decode() in this order. Each raises on failure.

def split_address(address: str) -> tuple:
  """Split at the rightmost separator, returning (prefix, datapart)."""
  # Only ASCII is case folded, anything else is left for charset_decode to report as typed
  address = "".join(x.lower() if x.isascii() else x for x in address)
  pos = address.rfind(SEPARATOR)
  if pos == -1:
    raise MissingSeparatorError("Invalid address format: missing '1' separator")
  if pos == 0:
    raise MissingSeparatorError("Invalid address format: empty prefix")
  if pos == len(address) - 1:
    raise MissingSeparatorError("Invalid address format: empty data")
  return address[:pos], address[pos + 1:]


def charset_decode(datapart: str, offset: int = 0) -> list:
  """Map characters to 5-bit values. Position in errors is counted from offset."""
  data = []
  for i, x in enumerate(datapart):
    value = CHARSET.find(x)
    if value == -1:
      raise InvalidCharacterError(x, offset + i)
    data.append(value)
  return data


def strip_checksum(prefix: str, data: list) -> list:
  """Verify and remove the trailing checksum values."""
  if not verify_checksum(prefix, data):
    raise ChecksumMismatchError("Invalid checksum: the address is corrupted or has a wrong prefix")
  return data[:-CHECKSUM_LEN]


def check_length(puzzle_hash: bytes) -> bytes:
  if len(puzzle_hash) != PUZZLE_HASH_LEN:
    raise InvalidLengthError(f"Decoded data is not {PUZZLE_HASH_LEN} bytes (got {len(puzzle_hash)} bytes)")
  return puzzle_hash


def decode(address: str) -> bytes:
  """Decode a Bech32m address into the 32-byte puzzle hash.

  Mixed or upper case input is accepted. Any prefix is accepted; use
  decode_prefixed() to also learn which one it was.

  :raises MissingSeparatorError: no separator, or empty prefix or data
  :raises InvalidCharacterError: a data character is not in CHARSET
  :raises ChecksumMismatchError: corrupted address or wrong prefix
  :raises PaddingError: invalid padding bits after regrouping
  :raises InvalidLengthError: payload is not 32 bytes
  """
  return decode_prefixed(address)[1]


def decode_prefixed(address: str) -> tuple:
  """Decode an address, returning (prefix, puzzle_hash)."""
  prefix, datapart = split_address(address)
  data = charset_decode(datapart, offset=len(prefix) + 1)
  data = strip_checksum(prefix, data)
  return prefix, check_length(unpack5to8(data))
