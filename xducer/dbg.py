from docopt import docopt
from xducer.transduce import map, filter, pipe, reduceWith, arrayOf, sumOf, countOf, joinedWith
from xducer.lazy import Reducible, naturals, take
from json import JSONEncoder
from tqdm import tqdm
import sys

json_encoder = JSONEncoder(ensure_ascii=False)
json_encode = lambda data: json_encoder.encode(data)

DBG_USAGE = \
"""
XducerDBG

Usage:
  xducerdbg fold (sum|count|list|join) [--step=<step>]... [<n>...]
  xducerdbg scan (sum|count) [--step=<step>]... [--take=<k>]
  xducerdbg range (sum|count) [--step=<step>]... [--quiet] <stop>
  xducerdbg steps

Options:
  --step=<step>  Named transducer. Steps run in the order given.
  --take=<k>     How many naturals to scan [default: 10].
  --quiet        Don't show a progress bar.
"""

STEPS = {
    'inc': map(lambda x: x + 1),
    'dec': map(lambda x: x - 1),
    'square': map(lambda x: x * x),
    'even': filter(lambda x: x % 2 == 0),
    'odd': filter(lambda x: x % 2 == 1),
    'positive': filter(lambda x: x > 0),
}

def step_named(name):
    if name in STEPS:
        return STEPS[name]
    else:
        raise ValueError("Unknown step %s, expected one of: %s" % (name, ", ".join(sorted(STEPS))))

def build_xform(names):
    return pipe(*[step_named(name) for name in names])

def terminal(args):
    """Returns (reducer, seed) for the selected reduction. Seeds are fresh per call."""
    if args['sum']:
        return (sumOf, 0)
    elif args['count']:
        return (countOf, 0)
    elif args['list']:
        return (arrayOf, [])
    elif args['join']:
        return (joinedWith(','), '')
    else:
        raise ValueError("No reduction selected")

def parse_ints(strs):
    return [int(s) for s in strs]

def dbg_main():
    return dbg_ui(sys.argv[1:])

def dbg_ui(argv):
    exitcode = 0
    args = docopt(DBG_USAGE, argv)
    if args['steps']:
        for name in sorted(STEPS):
            print(name)
        return exitcode
    xform = build_xform(args['--step'])
    reducer, seed = terminal(args)
    if args['fold']:
        result = reduceWith(xform(reducer), seed, parse_ints(args['<n>']))
        if args['list']:
            print(json_encode(result))
        else:
            print(result)
    elif args['scan']:
        count = int(args['--take'])
        accumulations = Reducible(naturals).reduce(xform(reducer), seed)
        for acc in take(count)(accumulations):
            print(acc)
    elif args['range']:
        stop = int(args['<stop>'])
        with tqdm(range(stop), desc="range", disable=args['--quiet'], leave=False) as values:
            result = reduceWith(xform(reducer), seed, values)
        print(result)
    return exitcode
