import pytest

from particle_ramps.core.sequence import PositionedSequence, clamp
from particle_ramps.core.types import ColorStop, ControlPoint


def _points(*xs):
    return [ControlPoint(x, 0.5) for x in xs]


def test_clamp():
    assert clamp(-1) == 0.0
    assert clamp(2) == 1.0
    assert clamp(0.5, 0.6, 0.9) == 0.6


def test_replace_sorts():
    seq = PositionedSequence(_points(1, 0, 0.5))
    assert [p.x for p in seq] == [0, 0.5, 1]


def test_key_selects_position_attribute():
    seq = PositionedSequence([ColorStop(1, "#000000"), ColorStop(0, "#ffffff")], key="pos")
    assert [s.pos for s in seq] == [0, 1]


def test_index_of_is_by_identity():
    a, b = ControlPoint(0.5, 0.5), ControlPoint(0.5, 0.5)
    seq = PositionedSequence([ControlPoint(0, 0), a, b, ControlPoint(1, 1)])
    assert seq.index_of(b) == 2
    with pytest.raises(ValueError):
        seq.index_of(ControlPoint(0.5, 0.5))


def test_insert_returns_landing_index():
    seq = PositionedSequence(_points(0, 0.5, 1))
    assert seq.insert(ControlPoint(0.25, 0.1)) == 1


def test_move_clamps_by_role():
    seq = PositionedSequence(_points(0, 0.5, 1))
    assert seq.move(0, 0.7) == 0 and seq[0].x == 0.0
    assert seq.move(2, 0.1) == 2 and seq[2].x == 1.0
    assert seq.move(1, 1.0) == 1 and seq[1].x == 0.99
    assert seq.move(1, 0.0) == 1 and seq[1].x == 0.01


def test_delete_rules():
    seq = PositionedSequence(_points(0, 0.3, 0.6, 1))
    assert not seq.delete(0)
    assert not seq.delete(3)
    assert not seq.delete(7)
    assert seq.delete(1)
    assert seq.delete(1)
    assert not seq.delete(1)
    assert len(seq) == 2


@pytest.mark.parametrize("index", [-1, -3, 3])
def test_negative_and_past_end_indices_are_rejected(index):
    seq = PositionedSequence(_points(0, 0.5, 1))
    with pytest.raises(IndexError):
        seq[index]
    with pytest.raises(IndexError):
        seq.move(index, 0.4)
    assert [p.x for p in seq] == [0, 0.5, 1]
