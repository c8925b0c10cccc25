"""ChessLang — a tiny command language over a simplified chessboard."""

__version__ = "0.1.0"
