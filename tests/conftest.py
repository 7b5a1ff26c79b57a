import pytest
from linked_list import LinkedList


def _check_links(ll: LinkedList) -> None:
    """head/tail agree with the chain they point into"""
    if ll.head is None:
        assert ll.tail is None
        return
    current = ll.head
    while current.next is not None:
        current = current.next
    assert ll.tail is current


@pytest.fixture
def assert_links():
    return _check_links
