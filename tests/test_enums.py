import pytest

from rustdrill.lessons.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), quit_requested=False)
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit_requested is True
    assert capsys.readouterr().out == "hello world\n"


def test_defaults_are_fresh_per_state():
    first = State()
    second = State()
    first.process(Move(Point(3, 4)))
    assert second.position == Point(0, 0)
    assert first.position == Point(3, 4)


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        State().process("jump")