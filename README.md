# swordgen

A simple wordlist generator. It takes a set of words and writes every
concatenation of those words, one per line. The concatenations run
from one word up to a maximum depth. Shorter lines come first. Within
one depth, the last position varies fastest. With the words `a,b` and
depth 2 the output is:

```
a
b
aa
ab
ba
bb
```

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Command line

```
swg -w WORD1,WORD2,...   [options]
swg -f PATH              [options]
```

If you run `swg` with no arguments, it prints the help page. You must
give exactly one of the two word sources:

- `-w`, `--words WORD1,WORD2` reads a comma-separated list of words.
  - Empty entries are skipped.
  - Each word is cut at its first space, carriage return or line feed.
- `-f`, `--file PATH` reads one word per line.
  - Trailing CR/LF is stripped.
  - Empty lines are skipped.

Optional arguments:

- `-o`, `--output PATH` writes the wordlist to a file. Without it, the
  wordlist goes to standard output.
- `-d`, `--depth NUM` sets the maximum depth, which must be at least 1.
  - The default is the number of words.
  - A larger value is capped to the number of words, with a warning.
- `-q`, `--quiet` suppresses informational messages and warnings.
- `-e`, `--estimate` prints the estimated number of lines and exits
  without writing the wordlist.
- `-h`, `--help` shows the help page.
- `-v`, `--version` shows the version (`0.2.7b`).

Limits:

- Words of 1024 characters or more are skipped with a warning. For
  `-w`, the limit counts UTF-8 bytes.
- At most 1024 words are read. Reading stops at the first word past
  that limit.
- If the estimate exceeds 500 million lines, `swg` asks `Proceed
  anyway? (y/N)`. It continues only on an answer that starts with `y`
  or `Y`.

Examples:

```
swg -w 1,2,3,4,5 -o all-five-digit.txt
swg -w foo,bar,baz,qux,quux --depth 3 --estimate
swg -f words.txt -o wordlist.txt
```

Exit statuses follow the BSD `sysexits` convention, as listed in
`swordgen.errors.ExitCode`:

| Status | Meaning |
| --- | --- |
| 0 | Success, help, version, estimate-only, or the user declined the prompt |
| 64 | Usage error |
| 66 | The input file cannot be opened |
| 73 | The output file cannot be created |
| 74 | Writing or closing the output failed |

## Library use

The generator functions live in `swordgen.generator`:

```python
import io
from swordgen.generator import iter_combinations, write_wordlist, estimate_lines

list(iter_combinations(["a", "b"], 2))
# ['a', 'b', 'aa', 'ab', 'ba', 'bb']

estimate_lines(2, 2)
# 6.0

buf = io.StringIO()
write_wordlist(buf, ["x", "y"], 1)   # returns the number of lines written: 2
buf.getvalue()
# 'x\ny\n'
```

`write_wordlist(out, words, max_depth, buffer_size)` batches its writes.
The batch size is given in characters and defaults to 8 MiB. A failed
or short write raises `swordgen.errors.OutputError`.

The other modules:

- `swordgen.wordio`
  - `WordLoader(quiet, warn)` collects words into its `words` list.
  - `load_file(path)` and `load_string(text)` each return the words
    they added.
  - An input file that cannot be opened raises `InputError`.
  - `prompt_user(stdin, stdout)` asks the confirmation question and
    returns a bool.
- `swordgen.args`
  - `parse_args(argv, prog)` turns the arguments after the program name
    into an `Options` dataclass.
  - Malformed input raises `UsageError`.
  - `help_text(prog)` and `version_text()` return the help page and the
    version.
- `swordgen.cli`
  - `run(argv, stdin, stdout, stderr)` runs the whole program against
    the streams you give it and returns the exit status.
  - `resolve_depth(...)` applies the depth defaulting and capping rules.
  - `main(argv)` is the console entry point.
- `swordgen.errors`
  - The errors all derive from `SwgError`.
  - Each error carries an `exit_code`.