"""
Rayas — line-wrapped syntax highlighting HTML

Turns a highlight event stream over source code into HTML where every
token is wrapped in ``<span class=ROLE>`` and every line in
``<span class=line>``, so consumers can number or highlight lines with
plain CSS.

Quick Start:
    >>> from rayas import Languages
    >>> from rayas.tokenizers.lexer import PygmentsTokenizer
    >>> languages = Languages().insert("python", PygmentsTokenizer.for_language("python"))
    >>> html = languages.render("python", "def f():\\n    return 1\\n")

Low-level rendering:
    >>> from rayas import HighlightEnd, HighlightStart, Source, names_to_classes, render_html
    >>> events = [HighlightStart(0), Source(0, 2), HighlightEnd()]
    >>> render_html(events, b"ab", names_to_classes(["string"]), "x")
    '<pre class=language-x><code><span class=line><span class=string>ab</span></span></code></pre>'

Installation:
    pip install rayas              # Renderer and registry (zero deps)
    pip install rayas[pygments]    # + Pygments tokenizer
"""

from rayas.classes import ClassTable, names_to_classes
from rayas.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from rayas.errors import (
    ConfigurationError,
    MalformedEventStreamError,
    RayasError,
    TokenizationError,
    UnknownLanguageError,
)
from rayas.events import (
    HighlightEnd,
    HighlightEvent,
    HighlightRegion,
    HighlightStart,
    Source,
    events_from_regions,
)
from rayas.registry import LanguageEntry, Languages
from rayas.renderer import HtmlRenderer, render_html
from rayas.tokenizers import FunctionTokenizer, Tokenizer, match_capture_name
from rayas.vocabulary import BASIC_ROLE_NAMES, DEFAULT_ROLE_NAMES

__version__ = "0.1.0"

__all__ = [
    "BASIC_ROLE_NAMES",
    "DEFAULT_ROLE_NAMES",
    "ClassTable",
    "ConfigurationError",
    "FunctionTokenizer",
    "HighlightEnd",
    "HighlightEvent",
    "HighlightRegion",
    "HighlightStart",
    "HtmlRenderer",
    "LanguageEntry",
    "Languages",
    "MalformedEventStreamError",
    "RayasError",
    "RenderConfig",
    "Source",
    "TokenizationError",
    "Tokenizer",
    "UnknownLanguageError",
    "events_from_regions",
    "get_render_config",
    "match_capture_name",
    "names_to_classes",
    "render_config_context",
    "render_html",
    "reset_render_config",
    "set_render_config",
    "__version__",
]
