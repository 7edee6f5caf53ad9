import pytest

from game2048.converter import DataConverter
from game2048.exceptions import CorruptBoardError, InvalidArgumentError

data_converter = DataConverter()


def test_board_to_text():
    board = [[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    assert data_converter.board_to_text(board) == "2,0,0,0;4,0,0,0;0,0,0,0;0,0,0,0"


def test_text_to_board():
    assert data_converter.text_to_board("2,0,0,0;4,0,0,0;0,0,0,0;0,0,0,2048") == [
        [2, 0, 0, 0],
        [4, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 2048],
    ]
    assert data_converter.text_to_board("8") == [[8]]
    assert data_converter.text_to_board("+2,0;0,0") == [[2, 0], [0, 0]]
    assert data_converter.text_to_board("2147483647,0;0,0") == [[2147483647, 0], [0, 0]]


@pytest.mark.parametrize(
    "text",
    [
        "2,x;0,0",
        "2,0;0,",
        "2.0,0;0,0",
        "2, 0;0,0",
        "2_0,0;0,0",
        "2,0;0,0;",
        "99999999999999999999,0;0,0",
        "2147483648,0;0,0",
        "-2147483649,0;0,0",
        "2,0,0;0,0,0",
        "",
        "   ",
        None,
    ],
)
def test_corrupt_text_is_rejected(text):
    with pytest.raises(CorruptBoardError) as excinfo:
        data_converter.text_to_board(text)
    assert not isinstance(excinfo.value, InvalidArgumentError)
