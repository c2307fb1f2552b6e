import sys
from typing import NoReturn

import colorama

from puzzlehash.cli.args import argparse
from puzzlehash.cli.dec import main_dec
from puzzlehash.cli.enc import main_enc

modes = {
  "enc": main_enc,
  "dec": main_dec,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling puzzlehash.encode and puzzlehash.decode directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid puzzle hash or address

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
