# contestlib

A small toolkit of algorithms and helpers that come up again and again in
competitive programming. It depends on nothing outside the standard library.

## Modules

- `contestlib.calendar_graph`
  - `CalendarGraph(adjacency, root=0)` numbers the root-to-leaf paths of a
    weighted DAG; `get_num(digits)` turns a path into its index,
    `get_path(num)` turns an index back into a path, and `total` is the number
    of paths.
  - `GregorianCalendar` covers years 1 to 10000, day 0 being 1 January of
    year 1: `date_to_days`, `days_to_date`, `day_of_the_week` (English day
    name) and `next_day`. Dates come back as `(year, month, day)` tuples.
- `contestlib.rng` — `rng(a, b)` draws a uniform integer in `[a, b]`;
  `shuffle(items)` shuffles a list in place.
- `contestlib.manacher` — `Manacher(s)` computes the palindrome radius of
  every centre (`rad`) and the maximal palindromes (`pal`); `is_pal(b, e)`
  tells whether `s[b..e]` is a palindrome.
- `contestlib.fft` — `fft(values, sign=1)` (length a power of two, `sign=-1`
  for the inverse) and `convolve(v1, v2)` for floating-point convolution.
- `contestlib.ntt` — number-theoretic transform: `fmt`, `conv` (cyclic),
  `convolve` (modulo an NTT-friendly prime), `convolution` (any modulus, via
  three NTT primes and the Chinese remainder theorem), `mod_pow`,
  `mod_inverse`, and `parse_number` / `format_number` for big numbers held
  in base-100000 limbs.
- `contestlib.hashing` — polynomial string hashing with random prime bases
  and moduli (`HashParams`, `HashPowers`, `HashValue`); `hash_forward`,
  `hash_reverse` and `hash_multiset` hash a whole sequence, and `Hashing(s)`
  gives the forward (`ha`), reverse (`rha`) and multiset (`pha`) hash of any
  substring in constant time. `is_prime` is a deterministic Miller-Rabin test
  and `random_primes(low, high)` picks two distinct primes.
- `contestlib.stress` — runs a trusted and a suspect program on generated
  test cases and counts the cases where their answers differ.
- `contestlib.debug` — text dumps of values and nested containers
  (`to_debug_string`, `format_debug`, `format_multi`), array slices and
  single elements (`format_array`, `format_single`), numbers in any base
  (`convert_basis`, `format_basis`), and `split_arguments` for splitting a
  comma-separated list of names.

## Examples

```python
from contestlib.calendar_graph import GregorianCalendar
from contestlib.manacher import Manacher
from contestlib.ntt import convolution, format_number, parse_number

cal = GregorianCalendar()
cal.next_day(2024, 2, 28)          # (2024, 2, 29)
cal.day_of_the_week(2024, 1, 1)    # "Monday"

Manacher("abacaba").is_pal(0, 6)   # True

a = parse_number("12345678901234567890")
b = parse_number("98765432109876543210")
format_number(convolution(a, b, 10**18))  # the product as a decimal string
```

## Stress testing

```
contestlib-stress ./good ./bad
```

Each iteration writes a fresh test case (two random integers from 1 to 1000)
to `work/tc.txt`, runs both commands with that file on standard input, saves
their standard output to `work/ans1.txt` and `work/ans2.txt`, compares the
two answers token by token and prints the iteration number and the running
count of mismatches. `--iterations` sets the number of cases and `--workdir`
the directory used; see `contestlib-stress --help`.

From Python, `run_stress(good, bad, iterations, workdir, generator)` does the
same and accepts a `generator` callable that returns the text of a test case.

## What it does not do

- `contestlib-stress` does not compile the programs; build them first. The
  test-case generator can only be changed from Python, not from the command
  line.
- The `contestlib.debug` functions return text; they print nothing
  themselves.

## Tests

```
pip install -e .[test]
pytest
```