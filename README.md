# ardrivo

Arduino-style runtime primitives for running sketches against a simulated board.

## What it provides

- `ardrivo.arduino` holds the core helpers:
  - `Level` (`LOW`, `HIGH`) and `PinMode` (`INPUT`, `OUTPUT`, and `INPUT_PULLUP`, which is an alias of `INPUT`).
  - `map_value` re-maps an integer from one range onto another. It truncates toward zero and raises `ZeroDivisionError` when the input range is empty.
  - `sq` returns its argument squared.
  - Character class tests for single ASCII characters: `is_alpha`, `is_alpha_numeric`, `is_ascii`, `is_control`, `is_digit`, `is_graph`, `is_hexadecimal_digit`, `is_lower_case`, `is_printable`, `is_punct`, `is_space`, `is_upper_case` and `is_whitespace`. `is_whitespace` accepts only space and tab.
  - `random_range(low, high=None)` returns an integer in `[low, high)`, or in `[0, low)` when only one argument is given. `random_seed` seeds its generator.
  - Bit helpers: `bit`, `bit_clear`, `bit_read`, `bit_set`, `bit_write`, `high_byte` and `low_byte`.
- `ardrivo.wstring` holds `String`, a mutable string with the Arduino `String` interface:
  - It can be built from text, from an integer in an optional base (`Base.BIN`, `Base.DEC`, `Base.HEX`, or the plain integers 2, 10 and 16), or from a float.
  - Searching and comparison: `index_of`, `starts_with`, `ends_with`, `compare_to`, `equals` and `equals_ignore_case`.
  - Editing: `substring`, `remove`, `replace`, `trim`, `to_lower_case`, `to_upper_case`, `set_char_at` and `concat` (or `+=`).
  - Conversion: `to_int`, `to_double` and `to_float`. Each returns 0 when the text does not begin with a number in range.
  - Byte access: `get_bytes` and `to_char_array`.
- `ardrivo.device` lays out shared storage for user-defined board devices:
  - A `DeviceSpecification` gives a device type's count of each field kind. These are raw 8/16/32/64-bit fields, atomic fields and mutexes.
  - A `BoardDevice` attaches a number of instances of a device type.
  - `DeviceAllocation` builds the banks. The raw bank is a `bytearray` with 64-bit fields first, then 32, 16 and 8. The atomic banks are integer lists and the mutex bank is a list of locks.
  - `get_bases(name)` returns the `AllocationBases` of a device type. It raises `KeyError` for an unknown name.

## What it does not do

- It has no printing or stream classes for serial-style output and input.
- It has no network client.
- It has no SD-card storage.
- It does not start or run sketches.
- It does not talk to a board process.

## Installation

```
pip install .
```

## Example

```python
from ardrivo.wstring import String, Base
from ardrivo.device import DeviceSpecification, BoardDevice, DeviceAllocation

s = String(255, Base.HEX)
print(str(s))                      # "FF"

spec = DeviceSpecification(full_string='"Led" "1" "u8 level"', name="Led", r8_count=1)
alloc = DeviceAllocation([BoardDevice(spec, count=2)])
print(alloc.get_bases("Led").count)  # 2
print(len(alloc.raw_bank))           # 2
```

## Running the tests

```
pip install .[test]
pytest
```