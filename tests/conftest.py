from pytest import Item, fixture

from torchcalc.session import Session


@fixture
def session():
    '''
    Fresh calculator session, unbounded history, default precision.
    '''
    return Session()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, in case a result later needs auditing.

    Only called with enable_assertion_pass_hook set; use with pytest -rP.
    '''
    print('checked', item.name + ':' + str(lineno), str(orig))
    # Drop the full-diff hint lines pytest appends.
    print('evaluated', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
