import sys

import pyperclip

from puzzlehash import bech, util
from puzzlehash.cli import tty


def main_dec(args):
  if args.paste and not args.files:
    values = [v for line in pyperclip.paste().splitlines() if (v := line.strip())]
    if not values:
      raise ValueError("Nothing to decode on the clipboard")
  else:
    values = tty.read_values(args)
  for address in values:
    prefix, puzzle_hash = bech.decode_prefixed(address)
    if prefix not in bech.KNOWN_PREFIXES and sys.stderr.isatty():
      sys.stderr.write(f" ⚠️  Unusual address prefix {prefix}\n")
    sys.stdout.write(f"{util.format_hex(puzzle_hash, prefix=not args.noprefix)}\n")
  sys.stdout.flush()
