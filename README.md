# saba

Building blocks of a small web browser engine, in pure Python with no
third-party dependencies.

## What is in the package

- `saba.url`: `Url` parses `http://host[:port]/path?query` URLs. `Url.parse()`
  fills in `host`, `port` (default `"80"`), `path` and `searchpart` and returns
  the same object; any URL without `http://` raises `UnexpectedInputError`.
- `saba.http`: `parse_response()` turns raw response text into an
  `HttpResponse` with `version`, `status_code`, `reason`, `headers` (a list of
  `Header`) and `body`. A status code that is not a number becomes 404.
  `HttpResponse.header_value(name)` returns the first matching header value
  and raises `KeyError` when there is none. Malformed responses raise
  `NetworkError`.
- `saba.dom`: the document model: `Node`, `Element`, `Attribute`, `Text`,
  `Document`, `Window` and `ElementKind` (`html`, `head`, `style`, `script`,
  `body`, `p`, `h1`, `h2`, `a`). `Node.children()` iterates over a node's
  direct children.
- `saba.dom_api`: `get_element_by_id`, `get_target_element_node`,
  `get_style_content`, `get_js_content` and `convert_dom_to_string`.
- `saba.style`: `ComputedStyle`, `Color` (named colours and `#rrggbb` codes),
  `FontSize`, `DisplayType` and `TextDecoration`.
  `ComputedStyle.defaulting()` inherits from a parent style where it differs
  from the initial value, then fills in per-element defaults.
- `saba.display`: `LayoutObject`, which computes its size and position and
  paints itself into `RectItem` and `TextItem` display items; plus
  `LayoutPoint`, `LayoutSize`, `LayoutObjectKind`, `split_text` and
  `find_index_for_line_break`.
- `saba.js_lexer`, `saba.js_ast`, `saba.js_runtime`: `JsLexer`, `JsParser` and
  `JsRuntime` for a tiny JavaScript subset: `var`, `function`, `return`, `+`,
  `-`, assignment, function calls and
  `document.getElementById(...).textContent = ...`.
- `saba.constants`: window geometry and colour constants.

All errors derive from `saba.errors.BrowserError` (`NetworkError`,
`UnexpectedInputError`, `InvalidUIError`, `OtherError`), except where noted
above.

## Installation

```
pip install .
```

## Examples

Parsing a URL:

```python
from saba.url import Url

url = Url("http://example.com:8888/index.html?a=123").parse()
print(url.host, url.port, url.path, url.searchpart)
# example.com 8888 index.html a=123
```

Parsing an HTTP response:

```python
from saba.http import parse_response

response = parse_response("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
print(response.status_code, response.header_value("Date"), response.body)
# 200 xx xx xx body message
```

Running a script against a DOM tree:

```python
from saba.dom import Attribute, Element, Node, Window
from saba.js_ast import JsParser
from saba.js_lexer import JsLexer
from saba.js_runtime import JsRuntime

window = Window()
document = window.document
paragraph = Node(Element("p", [Attribute("id", "msg")]))
document.first_child = paragraph
paragraph.parent = document

script = 'var target = document.getElementById("msg"); target.textContent = "hi";'
program = JsParser(JsLexer(script)).parse_ast()
JsRuntime(document).execute(program)
print(paragraph.first_child.kind.text)
# hi
```

Laying out and painting a text node:

```python
from saba.display import LayoutObject, LayoutSize
from saba.dom import Node, Text

node = Node(Text("hello world"))
box = LayoutObject(node, None)
box.defaulting_style(node, None)
box.update_kind()
box.compute_size(LayoutSize(590, 0))
print(box.size, box.paint()[0].text)
# LayoutSize(width=88, height=20) hello world
```

## What the package does not do

- It has no HTML or CSS parser: DOM trees are built by hand from `Node`
  objects, and there is no step that matches style rules against nodes.
- It does not build a whole layout tree from a document; `LayoutObject`s are
  created and linked by the caller.
- It does not fetch anything over the network; it only parses URLs and
  response text that it is given.
- It has no window, screen or command-line program; painting yields display
  items, not pixels.
- The lexer recognises `var`, `function` and `return` by prefix, so a name
  such as `variable` is read as the keyword `var` followed by `iable`.

## Running the tests

```
pip install .[test]
pytest
```