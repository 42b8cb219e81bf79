from chessmoves.move import MoveType, PieceType
from chessmoves.pawn import Pawn
from chessmoves.piece import Piece, Space
from chessmoves.pieces import Rook
from chessmoves.position import Position


class _Board:
    def __init__(self, current_move=0):
        self.squares = {}
        self.current_move = current_move

    def place(self, piece: Piece) -> Piece:
        self.squares[piece.position] = piece
        return piece

    def __getitem__(self, pos):
        return self.squares.get(pos, Space(pos))


def _texts(moves):
    return {move.text for move in moves}


def _dests(moves):
    return {move.dest for move in moves}


def test_white_pawn_from_start_moves_one_or_two():
    board = _Board()
    start = Position(4, 1)
    pawn = board.place(Pawn(start, True))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, 1), start.offset(0, 2)}
    assert "e2e4" in _texts(moves)


def test_white_pawn_simple():
    board = _Board()
    pawn = board.place(Pawn(Position(0, 1), True))
    assert "a2a3" in _texts(pawn.get_moves(board))


def test_black_pawn_from_start_moves_down():
    board = _Board()
    start = Position(4, 6)
    pawn = board.place(Pawn(start, False))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, -1), start.offset(0, -2)}
    assert all(move.is_white is False for move in moves)


def test_moved_pawn_steps_once():
    board = _Board()
    start = Position(3, 3)
    pawn = board.place(Pawn(start, True))
    assert _dests(pawn.get_moves(board)) == {start.offset(0, 1)}


def test_blocked_pawn_has_no_moves():
    board = _Board()
    start = Position(4, 1)
    pawn = board.place(Pawn(start, True))
    board.place(Rook(start.offset(0, 1), False))
    board.place(Rook(start.offset(0, 2), False))
    assert pawn.get_moves(board) == set()


def test_double_step_ignores_square_in_between():
    board = _Board()
    start = Position(4, 1)
    pawn = board.place(Pawn(start, True))
    board.place(Rook(start.offset(0, 1), False))
    assert _dests(pawn.get_moves(board)) == {start.offset(0, 2)}


def test_white_capture():
    board = _Board()
    start = Position(0, 5)
    pawn = board.place(Pawn(start, True))
    board.place(Rook(start.offset(1, 1), False))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, 1), start.offset(1, 1)}
    assert "a6b7r" in _texts(moves)


def test_own_pieces_not_captured():
    board = _Board()
    start = Position(3, 3)
    pawn = board.place(Pawn(start, True))
    board.place(Rook(start.offset(-1, 1), True))
    board.place(Rook(start.offset(1, 1), True))
    assert _dests(pawn.get_moves(board)) == {start.offset(0, 1)}


def test_black_capture():
    board = _Board()
    start = Position(3, 4)
    pawn = board.place(Pawn(start, False))
    board.place(Rook(start.offset(-1, -1), True))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, -1), start.offset(-1, -1)}
    captured = [m for m in moves if m.dest == start.offset(-1, -1)]
    assert captured[0].capture is PieceType.ROOK


def test_white_en_passant():
    board = _Board(current_move=4)
    start = Position(0, 4)
    pawn = board.place(Pawn(start, True))
    victim = board.place(Pawn(start.offset(1, 0), False))
    victim.last_move = 4
    moves = pawn.get_moves(board)
    assert "a5b6E" in _texts(moves)
    passant = [m for m in moves if m.move_type is MoveType.ENPASSANT]
    assert len(passant) == 1
    assert passant[0].dest == start.offset(1, 1)


def test_en_passant_needs_fresh_move():
    board = _Board(current_move=5)
    start = Position(0, 4)
    pawn = board.place(Pawn(start, True))
    victim = board.place(Pawn(start.offset(1, 0), False))
    victim.last_move = 4
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, 1)}
    assert _texts(moves) == {"a5a6"}


def test_en_passant_needs_opposite_colour():
    board = _Board(current_move=4)
    start = Position(3, 4)
    pawn = board.place(Pawn(start, True))
    friend = board.place(Pawn(start.offset(-1, 0), True))
    friend.last_move = 4
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, 1)}
    assert [m.move_type for m in moves] == [MoveType.MOVE]


def test_black_en_passant():
    board = _Board(current_move=7)
    start = Position(4, 3)
    pawn = board.place(Pawn(start, False))
    victim = board.place(Pawn(start.offset(-1, 0), True))
    victim.last_move = 7
    passant = [m for m in pawn.get_moves(board) if m.move_type is MoveType.ENPASSANT]
    assert [m.dest for m in passant] == [start.offset(-1, -1)]
    assert passant[0].is_white is False


def test_white_promotion():
    board = _Board()
    pawn = board.place(Pawn(Position(0, 6), True))
    moves = pawn.get_moves(board)
    assert _texts(moves) == {"a7a8Q"}
    assert all(move.promote is PieceType.QUEEN for move in moves)


def test_white_promotion_with_capture():
    board = _Board()
    start = Position(0, 6)
    pawn = board.place(Pawn(start, True))
    board.place(Rook(start.offset(1, 1), False))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, 1), start.offset(1, 1)}
    assert all(move.promote is PieceType.QUEEN for move in moves)


def test_black_promotion():
    board = _Board()
    start = Position(5, 1)
    pawn = board.place(Pawn(start, False))
    moves = pawn.get_moves(board)
    assert _dests(moves) == {start.offset(0, -1)}
    assert all(m.promote is PieceType.QUEEN and m.dest.row == 0 for m in moves)


def test_get_type():
    pawn = Pawn(Position(3, 3), True)
    assert pawn.piece_type is PieceType.PAWN
    assert pawn == PieceType.PAWN