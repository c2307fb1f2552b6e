from puzzlehash import bech, util
from puzzlehash.cli import tty


def main_enc(args):
  prefix = bech.normalize_prefix(args.prefix)
  # Validate everything before producing any output
  addresses = [bech.encode(util.parse_hex(v), prefix) for v in tty.read_values(args)]
  tty.write_values(args, addresses)
