"""chesscore — a chess rules engine: legal moves, check, checkmate, stalemate."""
