from docopt import docopt
from func_prototypes import typed, returned
from tqdm import tqdm
import sys
from fpfold.strategies import STRATEGIES, get_strategy

UI_USAGE = """
fpfold

Usage:
  fpfold strategies
  fpfold run [--strategy=<name>] [--size=<n>] [--progress]
  fpfold check [--size=<n>]

Options:
  --strategy=<name>  Strategy to evaluate [default: transduced].
  --size=<n>         How many integers, counting up from zero, to feed in [default: 1000].
  --progress         Show a progress bar while consuming the input.

"""

@returned(int)
@typed(str)
def parse_size(size):
    try:
        n = int(size)
    except ValueError:
        raise ValueError("Size must be an integer, got %s" % size)
    if n < 0:
        raise ValueError("Size must not be negative, got %d" % n)
    return n

def numbers(size, progress=False):
    return tqdm(range(size), total=size, disable=not progress, leave=False)

def ui_main():
    result = fpfold_ui(sys.argv[1:])
    sys.exit(result)

def fpfold_ui(argv):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    if args['strategies']:
        print("\n".join(STRATEGIES))
    elif args['run']:
        strategy = get_strategy(args['--strategy'])
        size = parse_size(args['--size'])
        print(strategy(numbers(size, args['--progress'])))
    elif args['check']:
        size = parse_size(args['--size'])
        results = {}
        for name, strategy in STRATEGIES.items():
            results[name] = strategy(numbers(size))
            print(name, results[name], sep="\t")
        if len(set(results.values())) > 1:
            print("Strategies disagree")
            exitcode = exitcode | 1
    return exitcode
