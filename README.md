# cmime

Small building blocks for reading and writing MIME messages. There are two
modules: a doubly linked list, and helpers that find line breaks and
multipart boundaries.

## Installation

```
pip install cmime
```

The package has no runtime dependencies. To run the tests, install the `test`
extra (`pip install cmime[test]`) and run `pytest`.

## Linked lists: `cmime.linkedlist`

`LinkedList` is a doubly linked list. Each value is held in a `ListElement`.
The element has `data`, `prev` and `next` attributes, plus `is_head()` and
`is_tail()` methods. The list exposes its first and last elements as `head`
and `tail`. Both are `None` when the list is empty.

```python
from cmime.linkedlist import LinkedList

items = LinkedList(None)
items.append("b")
items.prepend("a")
items.append("c")

print(list(items))           # ['a', 'b', 'c']
print(len(items))            # 3

items.insert_next(items.head, "a2")
print(list(items))           # ['a', 'a2', 'b', 'c']

print(items.pop_head())      # 'a'
print(items.pop_tail())      # 'c'
```

- Iterating over a list gives the values from head to tail. `elements()`
  gives the `ListElement` objects in the same order.
- `append(data)` and `prepend(data)` return the new element. They raise
  `ValueError` if `data` is `None`.
- `insert_next(elem, data)` and `insert_prev(elem, data)` insert next to an
  element of the same list and return the new element. On an empty list,
  `elem` may be `None`. On a non-empty list, a missing anchor or an anchor from
  another list raises `ValueError`.
- `remove(elem)` unlinks an element and returns its value. It raises
  `ValueError` if the element is missing or belongs to another list.
- `pop_head()` and `pop_tail()` return the removed value, or `None` if the
  list is empty.
- `map(func, *args)` calls `func(element, *args)` for every element, in order.
- `map_new(func, *args)` collects those return values in a new `LinkedList`.
- The constructor takes a `destroy` callback, or `None`. `clear()` removes
  elements from the tail. It passes each removed value to the callback, if
  there is one.

## Scanning helpers: `cmime.scanning`

```python
from cmime.scanning import determine_linebreak, get_boundary_info, BoundaryType

determine_linebreak("Subject: hi\r\nbody")   # '\r\n'
determine_linebreak("a\nb")                  # '\n'
determine_linebreak("no breaks here")        # None

info = get_boundary_info(["XYZ"], "--XYZ--\r\nrest", "\r\n")
info.type is BoundaryType.CLOSE              # True
info.marker                                  # '--XYZ--'
info.length                                  # 7
```

- `determine_linebreak(s)` returns the first kind of line break it finds in
  `s`. It checks for `"\r\n"` first, then `"\n"`, then `"\r"`. It returns
  `None` if `s` has no line break.
- `determine_linebreak_from_file(path)` reads the file in binary mode, one
  line at a time, with at most 511 bytes per read. It returns the first line
  break it finds, or `"\r\n"` if the file has none. It raises `OSError` if
  the file cannot be opened.
- `get_boundary_info(boundaries, s, newline)` compares the text of `s` up to
  the first `newline` with each boundary, in order.
  - A match against `--<boundary>--` gives a `BoundaryInfo` of type
    `BoundaryType.CLOSE`.
  - A match against `--<boundary>` gives a `BoundaryInfo` of type
    `BoundaryType.OPEN`.
  - The result is `None` if `newline` is `None`, if `s` does not contain it,
    or if nothing matches.

The module also defines a few string constants: `CRLF`, `DCRLF`, `LF`, `CR`,
`MIMETYPE_DEFAULT`, `MIMETYPE_TEXT_PLAIN`, the `PART_CONTENT_*_PATTERN` header
prefixes, `FROM_HEADER` and `LINE_LENGTH`.

## What this package does not do

There is no message parser or builder here. The package does not read a whole
MIME message into headers and parts, decode or encode bodies, or write messages
out. It only provides the list and scanning pieces described above.