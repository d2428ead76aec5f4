# pipeflow

`pipeflow` chains commands the way a shell pipe does. Input comes from a file or from a here-document. Output goes to a file.

## Installing

```
pip install .
```

## Running pipelines

This reads `infile` and runs each command in turn, with the output of each one feeding the next. The result goes to `outfile`:

```
pipeflow infile "grep foo" "wc -l" outfile
```

You can put any number of commands between the input and output files. If `outfile` already exists, it is truncated. If it does not exist, it is created with mode `0644`.

### Here-documents

```
pipeflow here_doc END "cat" "sort" outfile
```

In this form `pipeflow` reads lines from standard input until it reaches a line that is exactly `END`, and it shows a `>` prompt before each line. Those lines become the input of the first command. In this mode the output is appended to `outfile`.

### Behaviour

- Commands are split on spaces. A word that starts with a single quote runs to the next single quote, and the quotes are removed. For example, `"awk '{print $1}'"` becomes `awk` and `{print $1}`. Double quotes and backslash escapes have no special meaning.
- If a name is itself the path of an executable file, it is run as given.
- Otherwise `pipeflow` looks the name up in the directories of `PATH`. The search stops at the first directory that contains the name. If that file cannot be executed, the command counts as not found. When the environment has no `PATH`, `/usr/bin/` is tried.
- Empty command names, and names that start with `0`, are never resolved.
- A command that cannot be found is reported on standard error as `/!\ Command <name> not found /!\`. The rest of the pipeline still runs, and the next command reads empty input.
- If the input file cannot be opened, `Failed to open infile` is reported. The first command is skipped, and the command after it reads empty input.
- If the output file cannot be opened, `Failed to access or create file` is reported and the last command is not started.
- With fewer than four arguments, a usage message is printed on standard output and the exit status is 1. With `here_doc` and fewer than five arguments, a here-document usage message is printed on standard error and the exit status is 0.
- Otherwise `pipeflow` exits with status 0, whatever the commands returned.

## Using it as a library

```python
from pipeflow.pipeline import parse_arguments, run_pipeline

pipeline = parse_arguments(["in.txt", "grep foo", "wc -l", "out.txt"])
codes = run_pipeline(pipeline)   # exit codes of the commands that started
```

- `pipeflow.pipeline.Pipeline` holds the commands, the output file, and either an input file or a here-document limiter. Its `run(env, stdin, stderr)` method runs the chain. `parse_arguments` raises `UsageError` when the arguments do not describe a pipeline.

Other modules:

- `pipeflow.command`: `split_command`, `count_words` and `build_word` split command lines.
- `pipeflow.paths`: `find_command`, `search_path`, `path_directories`, `has_path_variable`, `is_executable` and `add_slash` resolve executables.
- `pipeflow.heredoc`: `read_here_doc` and `is_limiter` collect here-document input.
- `pipeflow.linereader`: `LineReader` reads lines from a file descriptor through a fixed-size buffer, 37 bytes by default.
- `pipeflow.printf`:
  - `printf` and `sprintf` form a small formatter that handles `%c %s %d %i %u %x %X %p %%` with C integer widths.
  - `format_char`, `format_str`, `format_int`, `format_unsigned`, `format_hex` and `format_pointer` format single values.
- `pipeflow.strings`: string helpers with C string semantics. These are `atoi`, `itoa`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `join`, `strtrim`, `split`, `strmapi` and `striteri`.
- `pipeflow.chars`: ASCII character classification and case conversion.
- `pipeflow.linkedlist`: `LinkedList`, a singly linked list.

## What it does not do

`pipeflow` is not a shell. It does not handle redirections inside a command, globbing, variable expansion, double quotes or escapes. It does not pass the exit status of the commands on as its own.

## Running the tests

```
pip install ".[test]"
pytest
```