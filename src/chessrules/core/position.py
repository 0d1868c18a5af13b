"""Position — complete game state (board + metadata) and the move executor."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, CastlingSide, Color, GameResult, PieceType
from chessrules.core.errors import ContractViolation
from chessrules.core.move import Move, MoveCheck
from chessrules.core.notation import parse_move
from chessrules.core.piece import Piece
from chessrules.core.types import Square


@dataclass(slots=True)
class Round:
    """One numbered line of the move log: white's ply and black's reply."""

    white_move: str
    black_move: str = ""


class Position:
    """Full game state: board, side to move, castling rights, captures, log.

    Only :meth:`apply_move` mutates a position once the game is under way;
    everything else in the engine reads it.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "rounds",
        "captured_by_white",
        "captured_by_black",
        "finished",
        "winner",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.rounds: list[Round] = []
        self.captured_by_white: list[Piece] = []
        self.captured_by_black: list[Piece] = []
        self.finished = False
        self.winner: Color | None = None

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    @property
    def opponent(self) -> Color:
        return self.side_to_move.opposite

    @property
    def result(self) -> GameResult:
        if self.winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.WHITE_WINS if self.winner == Color.WHITE else GameResult.BLACK_WINS

    def castling_allowed(self, side: CastlingSide, color: Color) -> bool:
        return bool(self.castling & CastlingRights.for_side(color, side))

    def last_move(self) -> Move | None:
        """The most recent ply, re-parsed from the log (None before any move)."""
        if not self.rounds:
            return None
        last = self.rounds[-1]
        # White just moved if black is to move, and vice versa.
        token = last.white_move if self.side_to_move == Color.BLACK else last.black_move
        if not token:
            return None
        return parse_move(token)

    def captured_by(self, color: Color) -> list[Piece]:
        return self.captured_by_white if color == Color.WHITE else self.captured_by_black

    # ── Move executor ────────────────────────────────────────────────────

    def apply_move(self, move: Move, check: MoveCheck) -> Piece | None:
        """Apply a move the validator accepted; returns the captured piece.

        No legality re-check happens here.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ContractViolation(f"No piece on {move.from_sq.name}")

        # Capture: ordinary, or the pawn beside the destination for en passant
        captured = self.board[move.to_sq]
        ep_sq = None
        if captured is None and check.en_passant.applied:
            ep_sq = check.en_passant.captured_square
            assert ep_sq is not None
            captured = self.board[ep_sq]
        if captured is not None and captured.color == piece.color:
            raise ContractViolation(
                f"{move.notation} would capture a piece of the same color"
            )

        placed = piece
        if check.promotion.applied:
            if check.promotion.piece_after is None:
                raise ContractViolation(f"{move.notation}: promotion piece not chosen")
            placed = check.promotion.piece_after

        # Nothing above touched the position
        self._log(move.notation)
        if ep_sq is not None:
            self.board[ep_sq] = None
        if captured is not None:
            self.captured_by(piece.color).append(captured)
        self.board[move.from_sq] = None
        self.board[move.to_sq] = placed

        # The king already jumped; now the rook lands beside it
        if check.castling.applied:
            rook_before = check.castling.rook_before
            rook_after = check.castling.rook_after
            assert rook_before is not None and rook_after is not None
            self.board[rook_after] = self.board[rook_before]
            self.board[rook_before] = None

        self._update_castling(piece, move.from_sq)
        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Internal ─────────────────────────────────────────────────────────

    def _log(self, notation: str) -> None:
        if self.side_to_move == Color.WHITE:
            self.rounds.append(Round(white_move=notation))
        elif not self.rounds:
            # Game set up with black to move
            self.rounds.append(Round(white_move="", black_move=notation))
        else:
            self.rounds[-1].black_move = notation

    def _update_castling(self, piece: Piece, from_sq: Square) -> None:
        color = piece.color
        if piece.piece_type == PieceType.KING:
            self.castling &= ~CastlingRights.for_color(color)
        elif piece.piece_type == PieceType.ROOK:
            # Column check only: any rook leaving file A or H costs that side.
            if from_sq.column == 0:
                self.castling &= ~CastlingRights.for_side(color, CastlingSide.QUEEN_SIDE)
            elif from_sq.column == 7:
                self.castling &= ~CastlingRights.for_side(color, CastlingSide.KING_SIDE)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy, log and captures included."""
        pos = Position(self.board.copy(), self.side_to_move, self.castling)
        pos.rounds = [Round(r.white_move, r.black_move) for r in self.rounds]
        pos.captured_by_white = self.captured_by_white.copy()
        pos.captured_by_black = self.captured_by_black.copy()
        pos.finished = self.finished
        pos.winner = self.winner
        return pos

    def __repr__(self) -> str:
        return f"Position(side_to_move={self.side_to_move}, castling={self.castling!r})\n{self.board!r}"
