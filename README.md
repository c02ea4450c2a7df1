# datakit

A small toolkit of data-handling helpers. It uses only the standard library.

## Installation

```
pip install .
```

## What is inside

- `datakit.linked_list.LinkedList`: a doubly linked list. An index `i` is
  valid when `-len <= i < len`; anything else raises `IndexError`. It has
  `append`, `insert`, `delete`, `pop`, `get`, `set`, `clear`, `fill`,
  `split` (cuts the list in place and returns the tail), `join` and `slice`
  (both return new lists), `copy`, `find` (returns the first index whose item
  is identical or equal, or `-1`) and `reverse`. It also supports `len()`,
  iteration and `[]` for reading and assignment.
- `datakit.stack.ByteStack`: a byte stack with a fixed capacity (512 by
  default). It pushes and pops single bytes, byte blocks, unsigned 16, 32 and
  64-bit values and single and double-precision floats, all little-endian.
  It raises `StackError` on overflow or underflow. `free_size()` and
  `capacity()` report space.
- `datakit.ieee754`: the dataclasses `Binary32` and `Binary64` split a float
  into sign, exponent and fraction fields (`from_float`) and put it back
  together (`to_float`). `Binary128` does the same for the two 64-bit halves
  of a quadruple-precision value (`from_bits`, `to_bits`). Fields that do not
  fit their bit width raise `ValueError`.
- `datakit.endian`: `is_little_endian`, `reverse_bytes` and `to_big_endian`.
- `datakit.memory_dump`: `hex_dump` and `oct_dump` return 16-column dumps of
  byte data as a string, with a column header and a four-digit hexadecimal
  offset on each line.
- `datakit.binary`: `bytes_equal`, `fill_bytes` and `copy_bytes` work on the
  first `size` bytes of buffers. `byte_to_bitchar` and `bitchar_to_byte`
  convert between a byte and its eight-character bit string.
- `datakit.convert`: `double_to_int`, `long_to_double`, `double_to_bits` (a
  signed 64-bit pattern) and `bits_to_double`.
- `datakit.bitmap`: `load_header` reads the 14-byte file header and the
  40-byte info header of a BMP stream into a `Bitmap`. `Bitmap` has `width`,
  `height`, `image_size` and `line_size` (padded row length in bytes). Any
  other info header size, or a stream that ends early, raises
  `BitmapFormatError`.
- `datakit.draw.RawImage`: an RGBA pixel grid of `Color` values with
  rectangle `fill`, `fill_all`, `plot` and `pixel`. `Point` is used for both
  positions and sizes. Points outside the image raise `IndexError`.
- `datakit.fstring.FString`: a string that tracks its used size (terminator
  included) and a reserved capacity in blocks of 16. It has `reset`,
  `resize` and `fill`. The helpers are `reserved_size` and `cstring_length`.
- `datakit.music_raw`: the `MusicRawHeader` and `MusicRaw` dataclasses, and
  `WaveHeader`, which parses and packs the fixed 36-byte RIFF/WAVE header.
- `datakit.errcode`: `make_code` and `get_sign`, `get_reserved`,
  `get_record_a` and `get_record_b` pack and unpack 32-bit error codes. It
  also has the `ListError` code enumeration.
- `datakit.status`: `ErrorRegister` holds the last `ErrorRecord`.
  `ThrowState` stores a `ThrowRecord` only while it is switched `on()`. It
  has `get`, `check` and the `last` property.

## Examples

```python
from datakit.linked_list import LinkedList

items = LinkedList([1, 2, 3, 4])
items.insert(1, 10)
items.reverse()
print(list(items), items[-1])   # [4, 3, 2, 10, 1] 1
```

```python
from datakit.memory_dump import hex_dump

print(hex_dump(bytes(range(32))))
```

```python
from datakit.ieee754 import Binary32

bits = Binary32.from_float(3.14)
print(bits.sign, bits.exponent, bits.fraction, bits.to_float())
```

## What it does not do

- `datakit.bitmap` reads headers only. It does not decode pixel data,
  palettes or bit-field masks.
- `datakit.music_raw` describes raw audio and WAVE headers but does not read
  or write audio files.
- `datakit.draw` fills rectangles and plots points. It has no shape drawing,
  cropping or scaling.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```