# saba

Building blocks of a small, educational web browser, usable as a plain
Python library with no third-party dependencies:

- `saba.url` — parses `http://` URLs into host, port, path and search part.
- `saba.js_token` — a lexer for a small subset of JavaScript.
- `saba.js_ast` — a recursive-descent parser producing an AST (`Program`).
- `saba.js_runtime` — a tree-walking interpreter for that AST.
- `saba.computed_style` — colours, font sizes, display types and style
  defaulting for layout.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## URLs

```python
from saba.url import Url, UrlError

url = Url("http://example.com:8888/index.html?a=123").parse()
url.host        # "example.com"
url.port        # "8888"
url.path        # "index.html"
url.searchpart  # "a=123"

Url("https://example.com").parse()  # raises UrlError
```

`Url.parse` fills in the parts on the object itself and returns a copy.
When no port is given, the port is `"80"`. Only the `http` scheme is
supported; `Url.is_http()` tells whether a URL uses it.

## JavaScript

```python
from saba.js_token import JsLexer
from saba.js_ast import JsParser
from saba.js_runtime import JsRuntime

program = JsParser(JsLexer("function foo(a, b) { return a + b; } foo(1, 2) + 3;")).parse_ast()
runtime = JsRuntime()
runtime.execute(program)
```

`JsLexer` is an iterator of `Token` objects, each with a `TokenKind` and a
value. It skips spaces and newlines and raises `LexError` on any character
it does not support. `JsParser.parse_ast()` returns a `Program` whose `body`
is a list of AST nodes (`ExpressionStatement`, `VariableDeclaration`,
`FunctionDeclaration`, `CallExpression` and so on); malformed function
declarations raise `ParseError`.

The language covers `var` declarations, assignment, `+` and `-`, string and
unsigned integer literals, member access, function declarations with
parameters, `return` and calls. Values are `NumberValue` (unsigned 64-bit,
wrapping) and `StringValue`; adding anything to a string concatenates.
An identifier with no binding evaluates to its own name as a string.
Calling an undefined function, or calling one with the wrong number of
arguments, raises `RuntimeError_`.

Each top-level statement can also be evaluated on its own, which returns
the statement's value (or `None`):

```python
program = JsParser(JsLexer("var foo=42; foo=1; foo")).parse_ast()
runtime = JsRuntime()
[runtime.eval(node, runtime.env) for node in program.body]
# [None, None, NumberValue(value=1)]
```

Scopes are `Environment` objects with `get_variable`, `add_variable` and
`update_variable`; each call runs in a new scope nested in the caller's.

## Styles

```python
from saba.computed_style import Color, ComputedStyle, DisplayType, FontSize, TextDecoration

Color.from_name("red").code_u32()   # 0xff0000
Color.from_code("#008000")          # Color(name="green", code="#008000")
DisplayType.from_str("none")        # DisplayType.DISPLAY_NONE

style = ComputedStyle()
style.defaulting(None, DisplayType.BLOCK, FontSize.MEDIUM, TextDecoration.NONE)
style.color                          # Color.black()
```

Unsupported colour names, codes and display values raise `StyleError`.
`ComputedStyle.defaulting(parent_style, display, font_size, text_decoration)`
fills in every property that was not set: colours, font size and text
decoration are inherited from the parent style when they differ from the
defaults (white background, black text, medium size, no decoration);
otherwise the defaults, or the node's own `display`, `font_size` and
`text_decoration` passed in, are used. Height and width default to `0.0`.

## What this package does not do

It is a set of pieces, not a browser. There is no HTML or CSS parser, no
DOM, no layout tree or painting, no HTTP client and no window or user
interface, and there is no command to run. The JavaScript runtime has no
access to a document, so browser APIs such as `document.getElementById` are
not available; a member expression such as `a.b` simply evaluates to the
string `"a.b"`.