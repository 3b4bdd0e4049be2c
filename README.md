# libmykit

A set of small helpers for text, numbers, lists, files, error messages and
printf-style formatting. It has no dependencies outside the standard library.

## Modules

- `libmykit.textcheck` covers ASCII character classes and searching.
  - Single characters: `is_alpha_char`, `is_digit_char`, `is_alnum_char`, `is_fence_char`, `is_lower_char`, `is_upper_char` and `is_print_char`.
  - Whole strings: `is_alpha`, `is_alnum`, `is_alnum_and`, `is_lower`, `is_upper`, `is_print` and `is_numeric`.
  - Searching: `find_char`, `find_any`, `find_str`, `count_occurrences` and `span_until`.
  - Comparison: `compare` and `compare_n`. Both return differences of character codes.
  - `int_len` returns the number of characters a number takes in decimal.
- `libmykit.textops` works on words and slices of text.
  - Words: `split_words`, `count_words`, `split_words_from` and `split_words_until`. The default separators are space and newline.
  - Case changes: `reverse`, `capitalize`, `lowcase` and `upcase`.
  - Slices: `slice_range`, `copy_until`, `dup_till` and `nullify_from_till`.
  - Joining: `dupcat`, `dup2cat` and `dupncat`.
  - Writing: `putstr`, `putint`, `putstr_range` and `int_to_str`.
- `libmykit.tab` has helpers for lists of strings: `put_tab`, `extend_tab` and `nullify_tab`.
- `libmykit.linked_list` provides a doubly linked `LinkedList` of `Cell` objects.
  - `add_head` and `add_tail` return the new cell. `remove` and `clear` unlink cells.
  - `cells` iterates over the cells, and `show` writes the data. `len()` and iteration are supported.
  - `swap_cells` exchanges the data held by two cells.
- `libmykit.mathutils` covers number helpers.
  - Base conversion: `to_base` for bases 2 to 16, and `base_length`.
  - Primes: `is_prime` and `find_prime_sup`.
  - Parsing: `getnbr`.
  - Powers and roots: `power`, `square_root` and `sqrt`. `sqrt` raises `OverflowError` from 1048577 upwards.
  - `is_neg` tells whether a number is negative.
- `libmykit.bits` has `swap_int_endians`, which reverses the byte order of a 32-bit integer.
- `libmykit.files` has `create_file`, `open_file`, `read_file` and `file_size`.
- `libmykit.errors` handles errno-indexed messages.
  - `error_message` returns the message for an error number.
  - `put_error`, `lput_error` and `put_os_error` write `label: message` to a stream, which is standard error by default.
- `libmykit.colors` holds the ANSI escape sequences in the `Color` enum.
- `libmykit.printf` is a printf-style formatter.
  - Functions: `format_string`, `printf` and `dprintf`. `dprintf` writes to a text stream or to a file descriptor. `parse_spec` and `FormatSpec` expose the option parsing.

## The formatter

The formatter supports these conversions:

| Letter | Converts |
| --- | --- |
| `d`, `i` | integers |
| `s` | text |
| `S` | a list of texts, one per line, or separated by spaces with the space flag |
| `x`, `X` | 32-bit hexadecimal |
| `b` | 32-bit binary, grouped by four with the space flag |
| `f` | floats |
| `p` | addresses |
| `c` | characters |

It parses the flags `#`, `0`, `-`, space and `+`, a width and a precision. Either can be given as `*`. It also accepts the `l` and `h` length modifiers.

Any other conversion letter is consumed and writes nothing. This includes `%`, `u`, `o`, `e` and `g`. A `%` at the very end of the format ends the output.

## Install

```
pip install .
```

## Example

```python
from libmykit.printf import format_string
from libmykit.textops import split_words

format_string("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'
split_words("hello why not", None)             # ['hello', 'why', 'not']
```

## Command

```
libmykit
```

This command is a short demonstration. It looks for the first space, newline or tab in two parts of a built-in sample text, then prints where it found one or that it found nothing. It takes no options beyond `--help`.

## Tests

```
pip install .[test]
pytest
```