# Single pass map/filter/reduce via reducer transformers.
# See https://raganwald.com/2017/04/30/transducers.html

from fpfold.compose import compose

def fold(reducer, seed, iterable):
    """
    fold takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell, but as a loop, so stack depth does not grow
    with the length of iterable.
    reducer is (b -> a -> b)
    Seed is b
    iterable is [a]
    fold is (b -> a -> b) -> b -> [a] -> b
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
    return accumulation

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Array accumulator which appends in place instead of reallocating on every
loop iteration. The seed list belongs to the fold that receives it.
"""

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Reducer which computes a sum"""

def mapStep(fn):
    """
    fn is (a -> c)
    Returns a transformer: given reducer (b -> c -> b) it returns the
    reducer (b -> a -> b) which feeds fn(val) downstream.
    """
    def transformer(reducer):
        def mapping(acc, val):
            return reducer(acc, fn(val))
        return mapping
    return transformer

def filterStep(pred):
    """
    pred is (a -> Bool)
    Returns a transformer: values failing pred never reach the downstream
    reducer, and the accumulator passes through unchanged.
    """
    def transformer(reducer):
        def filtering(acc, val):
            if pred(val):
                return reducer(acc, val)
            return acc
        return filtering
    return transformer

def composePipeline(transformers):
    """
    Combine an ordered list of transformers into one transformer.
    The first transformer listed is the first stage each value passes
    through. An empty list gives back the downstream reducer unchanged.
    """
    return compose(*transformers)

def transduce(transformer, reducer, seed, iterable):
    """
    transformer is ((b -> c -> b) -> (b -> a -> b))
    reducer is (b -> c -> b)
    seed is b
    iterable is [a]
    """
    return fold(transformer(reducer), seed, iterable)
