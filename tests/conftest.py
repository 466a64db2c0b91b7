from pytest import Item, fixture

from calc import Calculator


@fixture
def calculator() -> Calculator:
    '''
    Default, non-strict calculator.
    '''
    return Calculator()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Record every passing assertion on its test, so --junitxml reports show
    which expressions were actually checked.
    '''
    item.user_properties.append(('line {}'.format(lineno), orig))
