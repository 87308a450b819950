"""
Function composition.

compose(f, g, h)(x) == f(g(h(x))). Applied to reducer transformers this
makes the first function the outermost wrapper, so it is the first stage
an element passes through. Past four functions the unrolled closures are
chained in blocks of four.
"""

def identity(x):
    return x


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(x):
        return a(b(x))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(x):
        return a(b(c(x)))

    return _combined3


def _comp_4(a, b, c, d):
    def _combined4(x):
        return a(b(c(d(x))))

    return _combined4


_comp_fns = [
    lambda: identity,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
]


def _comp_n(*fns):
    fns = list(fns)
    tail = len(fns) % 4 or 4
    combined = _comp_fns[tail](*fns[-tail:])
    del fns[-tail:]
    while fns:
        combined = _comp_2(_comp_4(*fns[-4:]), combined)
        del fns[-4:]
    return combined


def compose(*fns):
    n = len(fns)
    if n < len(_comp_fns):
        return _comp_fns[n](*fns)
    return _comp_n(*fns)
