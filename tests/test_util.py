from fpfold.util import \
    filtered, \
    folded,   \
    isEven,   \
    mapped,   \
    pipeline, \
    plus,     \
    timesTen
from fpfold.transduce import arrayOf
import pytest

assert plus(1, 2) == 3
assert timesTen(3) == 30
assert isEven(2) is True
assert isEven(1) is False

def test_mapped():
    tens_list = mapped(timesTen)
    out = tens_list([1, 2, 3, 4])
    assert isinstance(out, list)
    assert out == [10, 20, 30, 40]
    assert tens_list(iter([])) == []
    assert tens_list.__name__ == "mapped_timesTen"

def test_filtered():
    even_list = filtered(isEven)
    assert even_list([1, 2, 3, 4]) == [2, 4]
    assert even_list(range(1, 4)) == [2]
    assert even_list.__name__ == "filtered_isEven"

def test_folded():
    assert folded(plus, int)([1, 2, 3]) == 6
    assert folded(plus, lambda: 10)([]) == 10

def test_folded_fresh_seed_per_call():
    collect = folded(arrayOf, list)
    assert collect([1, 2]) == [1, 2]
    assert collect([3]) == [3]
    assert collect([]) == []

def test_pipeline():
    identity_pipeline = pipeline()
    xs = [1, 2, 3]
    assert identity_pipeline(xs) is xs

    tens_pipeline = pipeline(mapped(timesTen))
    assert tens_pipeline([1, 2, 3]) == [10, 20, 30]

    # Stages run in the order given.
    assert pipeline(mapped(timesTen), filtered(isEven), folded(plus, int))([1, 2, 3, 4, 5]) == 150
    assert pipeline(filtered(isEven), mapped(timesTen), folded(plus, int))([1, 2, 3, 4, 5]) == 60
    assert pipeline(filtered(isEven), mapped(timesTen), list)([1, 2, 3, 4]) == [20, 40]

def test_pipeline_propagates_errors():
    with pytest.raises(ZeroDivisionError):
        pipeline(mapped(lambda x: 1 / x), list)([1, 0])
