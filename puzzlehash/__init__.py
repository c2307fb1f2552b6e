from puzzlehash.bech import decode, encode
from puzzlehash.exceptions import (
  AddressError, ChecksumMismatchError, InvalidCharacterError, InvalidLengthError, InvalidPrefixError,
  MissingSeparatorError, PaddingError
)

__version__ = "0.1.0"

encode_address = encode
decode_address = decode
