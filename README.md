# perfkit

A small collection of building blocks with well-defined behaviour:

- `perfkit.bigint`: `BigInt` is an immutable integer of any size. It stores a
  sign and a decimal digit string. `big_pow10(exp)` returns ten to the power
  `exp`.
- `perfkit.digits`: the digit-string arithmetic that `BigInt` is built on.
  It includes Karatsuba multiplication (`multiply_magnitudes`) and long
  division (`divmod_magnitudes`).
- `perfkit.bigmath`: `power`, `sqrt`, `gcd`, `lcm`, `factorial` and
  `big_random`, all working on `BigInt` values.
- `perfkit.pebbles`: the "Plutonian pebbles" simulation, with two
  strategies. `PebbleList` keeps every pebble in order. `PebbleCounter` keeps
  one count for each pebble value.
- `perfkit.algorithms`: `contains`, `find_slow`, `find_fast`,
  `move_n_elements_to_back`, `minmax_index`, `clamp`, `count_equal_range`,
  `to_string` and a `Grid` of integers stored row by row.
- `perfkit.templates`: `power_n`, `more_power_n`, a generic `Rectangle` and
  `is_square`.
- `perfkit.prehashed`: `PrehashedString`, whose hash is computed once when it
  is built, and `BitmapCache`, which loads each path once.
- `perfkit.hashing`: a frozen `Person` value type that can be used as a
  dictionary key.
- `perfkit.users`: helpers that count statistics over `User` records, or over
  parallel lists of levels and playing flags.
- `perfkit.best_practices`: `prefix`, `all_in_range`, `process_data` and
  `square`.
- `perfkit.principles`: a `Switch` that toggles any `Switchable`, for
  example a `Lamp`.

The package has no runtime dependencies and runs on Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Big integers

```python
from perfkit.bigint import BigInt
from perfkit.bigmath import factorial, gcd, power

n = BigInt("99999999999999")
print(n + 1)                         # 100000000000000
print(factorial(20))                 # 2432902008176640000
print(power(BigInt(2), 100))
print(gcd(BigInt(12), BigInt(18)))   # 6
```

You can mix `BigInt` with `int` and with digit strings, both in arithmetic
and in comparisons.

- Division (`//`) truncates toward zero.
- The remainder (`%`) takes the sign of the dividend.
- A string that is not an integer raises `ValueError`.
- Dividing by zero raises `ZeroDivisionError`.
- `to_int()` raises `OverflowError` when the value does not fit in a signed
  32-bit integer. `to_long()` and `to_long_long()` do the same for a signed
  64-bit integer.

## Pebbles

```python
from perfkit.pebbles import PebbleCounter

pebbles = PebbleCounter()
pebbles.load("125 17")
for _ in range(6):
    pebbles.blink()
print(pebbles.size())        # 22
```

To read pebbles from a file, use `read_puzzle_from_file(path)`. It reads only
the first line of the file.

## Commands

- `perfkit-bigint` prints a few `BigInt` examples. Add `--factorials` to also
  print the factorials of 2 to 20.
- `perfkit-pebbles [FILENAME] [--part {1,2}] [--blinks N]` loads pebbles from
  `FILENAME` and blinks `N` times. `FILENAME` defaults to
  `./Data/Puzzle11_RealData.txt`. `N` defaults to 25 for part 1 and 75 for
  part 2. The command prints the pebble count before and after blinking.
  Part 1 uses `PebbleList` and part 2 uses `PebbleCounter`.

## What it does not do

No puzzle input ships with the package. `perfkit-pebbles` needs a file that
you supply. If it cannot open that file, it reports the error and exits with
status 1.