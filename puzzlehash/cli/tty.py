import sys

import pyperclip


def read_values(args) -> list:
  """Command line values, with '-' or no values at all meaning one value per line of stdin."""
  values = []
  for v in args.files or ['-']:
    if v != '-':
      values.append(v)
      continue
    if sys.stdin.isatty():
      sys.stderr.write(" ⌨️  Enter one per line, Ctrl+D to finish:\n")
      sys.stderr.flush()
    values += [line.strip() for line in sys.stdin if line.strip()]
  if not values:
    raise ValueError("No input given")
  return values


def write_values(args, values):
  if args.paste:
    pyperclip.copy("\n".join(values))
    sys.stderr.write(" 📋 copied\n")
    return
  for v in values:
    sys.stdout.write(f"{v}\n")
  sys.stdout.flush()
