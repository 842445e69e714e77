import pytest

from sudokulite.models import InvalidInputError
from sudokulite.peers import box_index, peers_of


def test_9x9_cell_has_20_peers():
    for cell in (0, 40, 80, 13):
        assert len(peers_of(cell, 9)) == 20


def test_4x4_cell_has_7_peers():
    assert peers_of(0, 4) == (1, 2, 3, 4, 5, 8, 12)


def test_corner_peers_9x9():
    peers = set(peers_of(0, 9))

    assert set(range(1, 9)) <= peers               # row
    assert {9, 18, 27, 36, 45, 54, 63, 72} <= peers  # column
    assert {10, 11, 19, 20} <= peers               # rest of the box
    assert 0 not in peers
    assert 30 not in peers


def test_peer_relation_is_symmetric_and_irreflexive():
    for cell in range(81):
        peers = peers_of(cell, 9)
        assert cell not in peers
        for peer in peers:
            assert cell in peers_of(peer, 9)


def test_peers_are_sorted():
    peers = peers_of(44, 9)
    assert list(peers) == sorted(peers)


def test_box_index():
    assert box_index(0, 9, 3) == 0
    assert box_index(80, 9, 3) == 8
    assert box_index(30, 9, 3) == 4


def test_non_square_length_rejected():
    with pytest.raises(InvalidInputError):
        peers_of(0, 6)
