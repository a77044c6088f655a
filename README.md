# commitui

A small curses interface that guides you through writing a conventional
commit message and then runs `git commit -F` with it.

## Installation

```
pip install .
```

The interface uses Python's `curses` module, so it needs a platform where
that module is available (Linux, macOS and other POSIX systems).

## Usage

Stage your changes, then run inside the repository:

```
commitui
```

The interface walks through six steps, with a `Step n/6` line at the top:

1. **Type**: pick a commit type (`feat`, `fix`, `docs`, ...).
2. **Scope**: pick a scope from the list, or press Tab and type a custom one.
   Choosing the first entry (`no scope` by default) leaves the scope out, as
   does confirming an empty custom scope.
3. **Subject**: a short summary, checked as you type. Enter only moves on
   when it is not blank, is no longer than the maximum length (72 by default,
   counted in UTF-8 bytes), does not end with a period and does not start
   with an uppercase letter. The first rule broken is shown under the input.
4. **Body**: free text. Enter starts a new line; Enter on an empty line
   finishes the body.
5. **Breaking changes**: optional; written as a `BREAKING CHANGE:` footer.
6. **Preview**: review the whole message, press Tab to type issue
   references, and press `y` or Enter to commit.

Keys:

- `Esc` or `Ctrl+C`: quit, from any step
- `q`: quit, from the type list and the scope list
- `Tab`: switch between typing into the field and navigation
- `b` or `Left` (in navigation mode): go back one step; while typing issue
  references on the preview screen, `Left` goes back
- `Up` / `Down`: move through the type and scope lists

The resulting message looks like:

```
feat(api): add pagination to list endpoint

Results are now returned in pages of 50.

BREAKING CHANGE: the list endpoint no longer returns all items

Closes #12
```

Sections that are empty are left out, and the message always ends with a
newline. The message is written to a temporary file that is passed to
`git commit -F` and removed afterwards; the command then prints
`Commit successful!` or `Commit failed. See above for details.`

Note that quitting does not cancel: whatever has been entered so far is
still built into a message and handed to `git commit`, which refuses an
empty message on its own.

## Configuration

Settings are read from `commiTUI/config.toml` under your user configuration
directory (as reported by `platformdirs`), and then from `./commitui.toml` in
the current directory. Each key that a file sets overrides the value before
it; anything not set keeps its default.

```toml
types = ["feat", "fix", "docs", "chore"]
scopes = ["no scope", "core", "ui", "────────", "deps"]
subject_max_length = 50
subject_start_lowercase = true
subject_no_ending_period = true
```

Scope entries that begin with `─` are shown dimmed as separators and are
skipped when moving through the list.

A file that cannot be read is skipped; a file whose TOML cannot be parsed,
or whose keys have the wrong kind of value, is reported as a warning on
standard error and skipped. Unknown keys are ignored.

## Use as a library

The pieces behind the interface can be used on their own:

- `commitui.config.Config` with `Config.default()`, `Config.from_toml(text)`,
  `Config.load(global_path, local_paths)` and `merge(other)`
- `commitui.validation.validate_subject(subject, config)` returns the first
  rule broken as a message, or `None`
- `commitui.state.AppState` and `commitui.state.Step` hold the wizard state
- `commitui.controller.handle_key(state, key, config)` applies a
  `KeyEvent` and returns an `Outcome` (`CONTINUE`, `QUIT` or `CONFIRM`)
- `commitui.message.build_message(state)` and `preview_text(state)` render
  the message text
- `commitui.git.commit_with_message(message)` runs `git commit` and returns
  whether it succeeded

## What it does not do

commitui does not stage files, does not amend or sign commits and takes no
command-line options beyond `--help`; it only composes a message and passes
it to `git commit -F`.