from pytest import Item, fixture

from polish.converter import Converter
from polish.evaluator import Evaluator
from polish.lexer import Lexer


@fixture
def lexer():
    return Lexer()


@fixture
def converter():
    return Converter()


@fixture
def evaluator():
    return Evaluator()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Echo every passing assertion, to audit which expressions were checked.

    Only fires with enable_assertion_pass_hook set; read with pytest -rP.
    '''
    where = item.name + ':' + str(lineno)
    print('checked', where, str(orig))
    # Drop the trailing full-diff hint lines.
    print('explained', where, '\n'.join(str(expl).splitlines()[:-2]))
