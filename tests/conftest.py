from pytest import Item, fixture

from mathexpr import Evaluator


@fixture
def evaluator() -> Evaluator:
    '''
    Fresh evaluator with no variables or functions.
    '''
    return Evaluator()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, with its source and explanation.

    Only called with enable_assertion_pass_hook set; use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
