"""
Ways of computing the same thing: multiply each number by ten, keep the
even results, and sum them. Every strategy takes an iterable of ints and
returns an int, and they must all agree.
"""
from functools import reduce
from fpfold.transduce import composePipeline, filterStep, fold, mapStep, sumOf
from fpfold.util import filtered, folded, isEven, mapped, pipeline, plus, timesTen

def builtin_chain(numbers):
    return reduce(plus, filter(isEven, map(timesTen, numbers)), 0)

# One list per stage.
eager_pipeline = pipeline(mapped(timesTen), filtered(isEven), folded(plus, int))

_even_tens = composePipeline([mapStep(timesTen), filterStep(isEven)])

def transduced(numbers):
    """Single pass, no intermediate containers."""
    return fold(_even_tens(sumOf), 0, numbers)

def imperative(numbers):
    total = 0
    for n in numbers:
        n = timesTen(n)
        if isEven(n):
            total += n
    return total


STRATEGIES = {
    'builtin_chain': builtin_chain,
    'eager_pipeline': eager_pipeline,
    'transduced': transduced,
    'imperative': imperative,
}

def get_strategy(name):
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError("Unknown strategy %s, expected one of: %s" % (name, ", ".join(sorted(STRATEGIES))))
