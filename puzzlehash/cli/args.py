import sys

from puzzlehash.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.prefix = "xch"
    self.noprefix = None
    self.paste = None
    self.debug = None


encargs = dict(
  prefix='-p --prefix'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

decargs = dict(
  noprefix='-n --no-prefix'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('enc', 'encode', '-e'): return 'enc', encargs
  if arg in ('dec', 'decode', '-d'): return 'dec', decargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  # Separate mode selector from other arguments
  if av[0].startswith("-") and len(av[0]) > 2 and not av[0].startswith("--") and not needhelp(av):
      av.insert(1, f'-{av[0][2:]}')
      av[0] = av[0][:2]

  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (enc/dec/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-') or a == '-':
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      if any(arg not in shortargs for arg in list(a[1:])):
        falseargs = [arg for arg in list(a[1:]) if arg not in shortargs]
        print_help(args.mode, f' 💣  Unknown argument: puzzlehash {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in list(a[1:])]
    if isinstance(a, str):
      a = [a]
    for av in a:
      argvar = next((k for k, v in ad.items() if av in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: puzzlehash {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: puzzlehash {args.mode} {aprint} …')

  return args
