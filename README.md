# manifoldkit

A small library of everyday helpers: environment variables, filesystem
access, string manipulation, enum-backed bit flags and opt-in debug logging.
It has no dependencies outside the standard library.

## Installation

```
pip install manifoldkit
```

## Modules

### `manifoldkit.env`

```python
from manifoldkit import env

env.set("MY_VAR", "42")
env.get("MY_VAR")        # "42"
env.get("UNSET_VAR")     # "" when the variable is not set
env.processor_count()    # number of logical CPUs, or 0 if unknown
```

### `manifoldkit.strutil`

String helpers with ASCII semantics for case conversion and trimming.

```python
from manifoldkit import strutil

strutil.split("hello;manifold;strings", ";")   # ["hello", "manifold", "strings"]
strutil.split("", ";")                         # []
strutil.split("abc", "")                       # ["a", "b", "c"]
strutil.replace_all("strings", "s", "c")       # "ctringc"
strutil.join(["hello", "manifold"], " ")       # "hello manifold"
strutil.trim("\t  strings  \n")                # "strings"
strutil.to_upper("manifold")                   # "MANIFOLD"
strutil.to_lower("MANIFOLD")                   # "manifold"
strutil.starts_with("hello manifold", "hello") # True
strutil.ends_with("hello manifold", "manifold")# True
strutil.as_cstr("manifold")                    # b"manifold\x00"
```

`replace_all` raises `ValueError` when the substring to replace is empty.
`to_lower`, `to_upper` and `trim` only touch ASCII letters and ASCII
whitespace.

### `manifoldkit.bitflags`

`BitFlags` stores a set of flags of one type as bits in an integer; each
flag's value (an enum member's value, or the integer itself) is its bit
position, from 0 to 63.

```python
import enum
from manifoldkit.bitflags import BitFlags

class Permission(enum.Enum):
    READ = 0
    WRITE = 1

flags = BitFlags(Permission.WRITE)
flags[Permission.READ]           # False
flags.set(Permission.READ, True)
Permission.READ in flags         # True
flags.raw()                      # 3
flags.raw_flag(Permission.WRITE) # 2
flags.set(Permission.WRITE, False)
flags.clear()
flags.empty()                    # True
```

Mixing flags of different types raises `TypeError`; a bit position outside
0..63 raises `ValueError`. Two `BitFlags` compare equal when their raw
values are equal.

### `manifoldkit.fs`

Path helpers built on `pathlib`. Functions that need an existing path
raise `NoFileExistsError` (a subclass of `FileNotFoundError`) when it is
missing.

```python
from manifoldkit import fs

fs.cwd()
fs.home()                                 # Path of the HOME variable
fs.write_bytes("data.bin", b"\xaa\xbb")   # the file must already exist
fs.read_file_bytes("data.bin")            # b"\xaa\xbb"
fs.read_file("notes.txt")                 # UTF-8 text, line endings kept
fs.absolute_path("notes.txt")
fs.relative_path("/tmp/a/b.txt", "/tmp")  # Path("a/b.txt")
fs.path_exists("notes.txt")
fs.is_file("notes.txt"), fs.is_dir(".")
fs.is_absolute("/tmp"), fs.is_relative("a/b")
fs.search(".", lambda p: p.suffix == ".toml")
```

`search` walks the directory recursively in name order, visiting files
and directories alike, and returns the first path the matcher accepts; it
raises `NoFileExistsError` when nothing matches.

### `manifoldkit.dbg`

```python
from manifoldkit import dbg

dbg.set_debug(True)
dbg.is_debug()                  # True
dbg.debug_log("value is ", 3)   # "[script.py:5@<module>] value is 3\n"
```

`debug_log` joins its arguments without separators, prefixes the caller's
file (relative to the working directory), line and function, and appends a
newline. The line is written to standard error only while debug output is
on, and is returned either way.

## What it does not do

manifoldkit is a library only: it installs no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```