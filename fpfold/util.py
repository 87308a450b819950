from fpfold.compose import compose
from fpfold.transduce import fold

def mapped(func):
    """Eager map: builds a new list, one loop, no per-element reallocation."""
    def mapper(collection):
        out = []
        for x in collection:
            out.append(func(x))
        return out
    mapper.__name__ = "mapped_" + func.__name__
    return mapper

def filtered(pred):
    def filterer(collection):
        out = []
        for x in collection:
            if pred(x):
                out.append(x)
        return out
    filterer.__name__ = "filtered_" + pred.__name__
    return filterer

def folded(reducer, new_seed):
    """new_seed is called for a fresh seed on every call of the folder."""
    def folder(collection):
        return fold(reducer, new_seed(), collection)
    folder.__name__ = "folded_" + reducer.__name__
    return folder

def pipeline(*funcs):
    """
    Run whole collection stages in the order given: pipeline(f, g)(xs) is g(f(xs)).
    No stages at all is the identity.
    """
    return compose(*reversed(funcs))

def isEven(n):
    return n % 2 == 0

def timesTen(x):
    return x * 10

def plus(x, y):
    return x + y
