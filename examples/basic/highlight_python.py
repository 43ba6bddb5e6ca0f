"""Highlight a Python snippet to line-wrapped HTML (requires rayas[pygments])."""

from rayas import Languages, RenderConfig
from rayas.tokenizers.lexer import PygmentsTokenizer

languages = Languages(config=RenderConfig(line_separator="\n"))
languages.insert("python", PygmentsTokenizer.for_language("python"))

source = '''def greet(name):
    """Say hello."""
    return f"Hello, {name}!"
'''

print(languages.render("python", source))
print(languages.render("cobol", source))  # None: not registered
