class AddressError(ValueError):
  """Address string or puzzle hash could not be converted"""

class InvalidLengthError(AddressError):
  """Puzzle hash is not exactly 32 bytes"""

class InvalidPrefixError(AddressError):
  """Prefix is empty or contains non-printable characters"""

class MissingSeparatorError(AddressError):
  """No '1' separator, or nothing on either side of it"""

class InvalidCharacterError(AddressError):
  """Data part contains a character outside of the Bech32 charset"""

  def __init__(self, char, position):
    super().__init__(f"Invalid character {char!r} in address at position {position}")
    self.char = char
    self.position = position

  def __reduce__(self):
    return self.__class__, (self.char, self.position)

class ChecksumMismatchError(AddressError):
  """Checksum does not match, the address is corrupted or has a wrong prefix"""

class PaddingError(AddressError):
  """Non-zero or excess padding bits left after 5-to-8 regrouping"""
