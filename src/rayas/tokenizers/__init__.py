"""Rayas tokenizers.

Tokenizers turn source bytes into highlight event streams.

Available Tokenizers:
- FunctionTokenizer: Wraps a function yielding (start, end, capture_name)
- PygmentsTokenizer: Runs a Pygments lexer (rayas.tokenizers.lexer,
  requires the ``pygments`` extra)

"""

from rayas.tokenizers.function import CaptureResolver, FunctionTokenizer
from rayas.tokenizers.protocol import Tokenizer, match_capture_name

__all__ = ["CaptureResolver", "FunctionTokenizer", "Tokenizer", "match_capture_name"]
