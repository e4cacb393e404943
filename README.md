# mtcenter

An interactive command shell. Each line you type is a command made of a
namespace, an action verb, an optional target and any number of flags:

```
<namespace> <action> [target] [--flag ...]
```

## Installing

```
pip install .
```

## Running the shell

```
mtcenter
```

`mtcenter --help` shows the usage; the command takes no other options.

The prompt is `[MT6883-VSC] > `. Results are shown in green when a command
succeeds and in red when it fails. Any payload is printed below the result
as indented JSON with its keys sorted. Type `exit` or `quit`, or end the
input, to leave. Empty lines are ignored.

## Commands

| Command | What it does |
| --- | --- |
| `system crawl [--target=PATH]` | Records an asset for `PATH`, or for `.` if no path is given, and shows it |
| `system status` | Shows how many modules the store holds and the latest snapshot id |
| `module avail` | Lists the modules in the store |
| `module load NAME` | Marks a module name as loaded; any name is accepted |
| `plugin register PATH` | Describes a plugin for `PATH`. Its name is taken from the file name |
| `security audit` | Lists the audit events in the store |
| `security mfa USER --enroll` | Enrolls a user in multi-factor authentication |
| `security mfa USER --verify` | Verifies a user. This succeeds about nine times in ten |
| `data ingest SOURCE` | Returns a new `gdb_id` of the form `gdb_YYYYMMDD_HHMMSS_<uuid>` |
| `ai analyze DATASET` | Returns an analysis report with status `running` |
| `bio enroll USER` | Enrolls a user's biometrics |
| `cloud sync [--snapshot]` | Records a sync request |
| `session save --now` | Saves a session snapshot and returns its id |
| `session rollback SNAPSHOT_ID` | Makes that snapshot the latest, dropping newer ones; fails for an unknown id |
| `integrator chat --enable` | Switches the chat integrator on |
| `phone profile --list` | Lists phone profiles. `tel` can be used in place of `phone` |
| `phone dial NUMBER` | Returns a call session in state `dialing` |

Any word that starts with `-` is a flag. The first other word after the
action is the target. Any further words are also treated as flags.

The namespaces `audit`, `upgrade` and `custom` are recognised by the parser,
but no commands are installed for them; using them gives
`no handler for <Namespace> <action>`.

## Example

```
[MT6883-VSC] > session save --now
session saved
{
  "snapshot_id": "snap_..."
}
[MT6883-VSC] > system status
system status
{
  "latest_snapshot": "snap_...",
  "modules_loaded": 0
}
```

## Using it from Python

```python
from mtcenter.parser import parse_line
from mtcenter.registry import Registry
from mtcenter.router import init_registry
from mtcenter.storage import MemoryStore

store = MemoryStore()
store.seed()  # adds the built-in DNA_MFA_Module entry
registry = Registry()
init_registry(registry, store)

result = registry.dispatch(parse_line("module avail"))
print(result.ok, result.message, result.payload)
```

`init_registry()` with no arguments installs the commands into the
process-wide registry (`mtcenter.registry.global_registry()`) backed by the
process-wide store (`mtcenter.storage.default_store()`), which is what the
shell uses. `CommandResult.success` and `CommandResult.failure` build results
for your own handlers, which you add with `Registry.register`.

`parse_line` raises `ParseError` (a `ValueError`) when:

- the line is empty
- the namespace is unknown
- the action verb is missing

`mtcenter.security` also offers `encrypt_aes256(key, plaintext)`, which takes
a 32-byte key and returns the 12-byte nonce followed by the AES-256-GCM
ciphertext and tag, and `encrypt_aes256_base64`, which returns the same as
standard base64 text. A key of any other length raises `ValueError`.

## What it does not do

- Everything is kept in memory and is lost when the shell exits.
- The shell's store starts empty; nothing calls `MemoryStore.seed()`, so
  `module avail` lists nothing and `system status` reports 0 modules.
- Nothing records audit events or users, so `security audit` always returns
  an empty list.
- `plugin register`, `module load` and `data ingest` do not read any file or
  add anything to the store.
- Cloud sync, biometric enrollment, analysis and dialing are simulated: no
  network, device or call is involved.
- There is no decryption helper.

## Tests

```
pip install .[test]
pytest
```