"""chesscompat: convert chess moves and positions to board-widget formats.

- Destination maps and move squares for chessground:
  `from chesscompat.core.compat import chessground_dests, chessground_move`
- Compact 2-character move codes (scalachess):
  `from chesscompat.core.compat import encode_char_pair, decode_char_pair`
- lichess variant names: `from chesscompat.core.compat import lichess_rules, lichess_variant`
- python-chess adapter: `from chesscompat.core.chess import BoardPosition`
"""

__version__ = "0.1.0"

# Re-export common entry points for convenience
from chesscompat.core import load_compat_config, load_config, save_config, setup_logging
from chesscompat.core.compat import (
    chessground_dests,
    chessground_move,
    decode_char_pair,
    encode_char_pair,
    lichess_rules,
    lichess_variant,
)

__all__ = [
    "__version__",
    "chessground_dests",
    "chessground_move",
    "decode_char_pair",
    "encode_char_pair",
    "lichess_rules",
    "lichess_variant",
    "load_compat_config",
    "load_config",
    "save_config",
    "setup_logging",
]
