import sys
from typing import NoReturn

import puzzlehash

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  enc=f"{C}puzzlehash {F}enc {D}[{F}-p {N}prefix{D}] [{F}-A{D}] [{N}0x…puzzlehash{D}]…{N}\n",
  dec=f"{C}puzzlehash {F}dec {D}[{F}-n{D}] [{F}-A{D}] [{N}xch1…address{D}]…{N}\n",
)

usagetext = dict(
  enc=f"""\
Encode 32-byte puzzle hashes (64 hex digits, optional 0x) as Bech32m
addresses. When no hashes are given or {F}-{N} is included, reads one hash per
line from stdin.

  {F}-p --prefix {N}xch   Address prefix: xch, txch, nft, did or any other
  {F}-A{N}                Auto copy: the address is copied to clipboard
""",
  dec=f"""\
Decode Bech32m addresses into puzzle hashes. Any prefix is accepted and the
checksum is always verified. When no addresses are given or {F}-{N} is included,
reads one address per line from stdin.

  {F}-n --no-prefix{N}    Output hex without the 0x prefix
  {F}-A{N}                Auto paste: the address is read from clipboard
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Puzzlehash {puzzlehash.__version__} - Bech32m address encoder and decoder"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Use {F}enc{N} to turn a puzzle hash into an address and {F}dec{N} for the reverse.

  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

  - {C}puzzlehash {F}enc {N}0x0b8622123401acf18bda97dfaa9d2c5e81f2be8c737c283e18903b35d209553e
  - {C}puzzlehash {F}enc -p {N}txch 0b8622123401acf18bda97dfaa9d2c5e81f2be8c737c283e18903b35d209553e
  - {C}puzzlehash {F}dec {N}xch1pwrzyy35qxk0rz76jl0648fvt6ql905vwd7zs0scjqant5sf25lql4hz3z
  - {C}puzzlehash {F}dec -n {N}nft1pwrzyy35qxk0rz76jl0648fvt6ql905vwd7zs0scjqant5sf25lqed89dp
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Puzzlehash {puzzlehash.__version__}")
  sys.exit(0)
