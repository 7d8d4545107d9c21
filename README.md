# pocketkit

A handful of small, self-contained tools in one package: a word counter,
a brace checker, an interactive unit converter, a to-do list kept in a JSON
file, a URL-shortening web service, and a few solved puzzle exercises.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `pocket-wc` — count lines, words, bytes and characters

```
pocket-wc [option] [filename]
```

Options:

- `-c` byte count
- `-l` line count
- `-w` word count
- `-m` character count (line endings are not counted)

Each count is printed right-aligned in a field of eight, followed by the
filename when one was given. A single argument that starts with `-` is taken
as the option and standard input is read; any other single argument is taken
as the filename. When the option is not one of the four above, the line, word
and byte counts are printed together. Run without arguments to see the usage
text. If the file cannot be opened, an error is printed and the exit status
is 1.

```
pocket-wc -l notes.txt
cat notes.txt | pocket-wc -w
pocket-wc notes.txt
```

From Python, `pocketkit.wordcount` offers `count_bytes`, `count_lines`,
`count_words` and `count_chars`, each taking a binary stream.

### `pocket-braces` — check for a single brace pair

```
pocket-braces document.json
```

Collects every `{` and `}` in the file and prints `Valid JSON` when they are
exactly one opening brace followed by one closing brace, `Invalid JSON`
otherwise; a file that cannot be read counts as invalid. The exit status is 0
for valid and 1 for invalid input or a missing argument. This is not a full
JSON validator: only the braces are looked at.

From Python: `pocketkit.braces.tokenize(text)` and `pocketkit.braces.parse(tokens)`.

### `pocket-convert` — interactive unit converter

```
pocket-convert
```

Shows a menu for meters ⇌ feet, Celsius ⇌ Fahrenheit and kilograms ⇌ pounds.
Pick an option, enter a value, and the result is printed to two decimal
places. Enter `0` (or anything that is not a whole number) to exit.

The same conversions are available from Python through the
`pocketkit.converter.Conversion` enum, `convert(conversion, value)` and
`describe(conversion, value)`:

```python
from pocketkit.converter import Conversion, describe

describe(Conversion.METERS_TO_FEET, 10)   # '10.00 meters = 32.81 feet'
```

### `pocket-todo` — a to-do list kept in `tasks.json`

```
pocket-todo add "Buy milk"
pocket-todo list
pocket-todo list --all
pocket-todo complete 1
pocket-todo delete 1
```

Tasks are stored in `tasks.json` in the current directory. `list` shows open
tasks; `--all` includes finished ones. A new task gets the number one more
than the count of tasks already stored. `complete` fails for a task that is
missing or already done; `delete` fails for a missing task.

From Python, use `pocketkit.todo.TaskStore(path)` with its `load`, `save`,
`add`, `list`, `complete` and `delete` methods; entries are
`pocketkit.todo.Task` dataclasses.

### `pocket-shortener` — a small URL-shortening web service

```
pocket-shortener [--env-file .env] [--host 0.0.0.0] [--port 8081]
```

Reads its database settings from the env file and connects to MySQL:

```
DB_USER=user
DB_PASS=password
DB_HOST=localhost
DB_PORT=3306
DB_NAME=shortener
```

The service then answers:

- `POST /shorten` with a JSON body `{"url": "https://example.com/some/long/path"}`
  stores a random six-character key and returns
  `{"key": ..., "url": ..., "shortUrl": ...}`. Other methods get 405, a body
  without a `url` gets 400, and a failed insert gets 500.
- `/<key>` redirects (302) to the stored URL, or answers 404.

Short URLs are always built on `http://localhost:8081/` when started from the
command, whatever `--host` and `--port` say.

For embedding, `pocketkit.shortener.create_app(store, base_url)` builds the
Flask application around any object with `save_url(short_key, original_url)`
and `get_url(short_key)`, such as `UrlDatabase(connection)`.
`connect_from_env(env_file)` opens the MySQL connection and
`generate_key(length)` makes a random key of letters and digits.

#### What it does not do

The service does not create its database or table. The database named by
`DB_NAME` must already hold a table `urls` with columns `short_key` and
`original_url`. Keys are not checked for collisions before they are stored.

## Puzzle helpers

`pocketkit.problems` holds a few small solved exercises:

- `equalize_cost(values)` — total of each value's distance from the minimum
  (0 for no values).
- `best_balance(n)` — the largest of `n`, `n` without its last digit, and `n`
  without its second-to-last digit.
- `count_even_digit_numbers(nums)` — how many numbers have an even length
  when written out, a minus sign included.