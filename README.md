# webnook

A dependency-free collection of building blocks for small web programs:
an HTML builder, string and encoding helpers, Unicode conversion, IP address
handling with non-blocking socket creation, and simple file access.

## Modules

- `webnook.html`: `HtmlWriter` records tags, attributes and inline styles as
  a chain of `HtmlNode` objects under an `<html>` root; `render()` (or
  `render_html(root)`) turns the chain into markup. Text and attribute values
  are written as given, without escaping.
- `webnook.chars`: ASCII predicates (`is_numeric`, `is_whitespace`, ...) and
  `CharClass`, a character set with ready-made `ALPHA`, `NUMERIC`,
  `ALPHANUMERIC` and `WHITESPACE` instances.
- `webnook.text`: matching (`match`, `match_any`, `match_prefix`, `find`,
  with `MatchFlag.IGNORE_CASE`), cutting (`cut_count`, `cut_find`, `substr`,
  `substr_from_finds`), number parsing that returns the unparsed remainder
  (`int_from_str`, `int_from_hex_str`, `float_from_str`), and `StringList`.
- `webnook.encoding`: number formatting (`format_int`, `format_hex`,
  `format_float`, ...), backslash escaping (`escape`, `unescape`), URL
  escaping (`url_escape`, `url_unescape`), binary dumps (`format_binary`) and
  base64 (`base64_encode`, `base64_decode`).
- `webnook.unicode`: reading and writing code points as UTF-8 bytes or as
  lists of UTF-16 / UTF-32 units, and conversions between them
  (`utf16_from_utf8`, `utf8_from_utf32`, ...). Malformed input yields
  `UNICODE_ERROR`, which is written back as U+FFFD.
- `webnook.bits`: byte-order swaps, flag helpers on 8-bit values, and
  splitting or joining words (`make_dword`, `high_word`, ...).
- `webnook.net`: `IPAddr` with `parse_ip` and `format_ip`, constructors for
  IPv4 and IPv6 addresses, and `create_server_socket` /
  `create_client_socket`, which open non-blocking TCP sockets.
- `webnook.fileio`: `read_file`, `write_file`, `file_size`, `read_segment`,
  `write_segment`, and `std_output` / `std_output_error`.

## Installing

```
pip install .
```

## Examples

Building HTML:

```python
from webnook.html import HtmlWriter, STYLE_COLOR, TAG_P

writer = HtmlWriter()
with writer.tag(TAG_P):
    writer.style(STYLE_COLOR, "red")
    writer.text("Red")

print(writer.render())
# <html><p style="color:red;">Red</p></html>
```

Addresses:

```python
from webnook.net import format_ip, parse_ip

print(format_ip(parse_ip("192.168.0.1")))  # 192.168.0.1
print(format_ip(parse_ip("::1")))          # 0:0:0:0:0:0:0:1
print(parse_ip("::1").is_ipv6())           # True
```

Text and encodings:

```python
from webnook.encoding import base64_encode, url_escape
from webnook.text import cut_find, int_from_str

base64_encode(b"hello")      # 'aGVsbG8='
url_escape("a b")            # 'a%20b'
cut_find("key=value", "=")   # ('key', 'value')
int_from_str("42px")         # (42, 'px')
```

## What this package does not do

There is no HTTP server here: nothing accepts connections, parses requests
or sends responses, and the package installs no command. `webnook.net` only
opens listening or connecting sockets; reading from them, polling them and
speaking HTTP over them is left to the program that uses them.

## Tests

```
pip install .[test]
pytest
```