# devgeini

A command-line companion that scaffolds new frontend projects with a working
structure and boilerplate, then tells you how to install and run them.

## Installation

```
pip install .
```

## Usage

Run it with no arguments to get the interactive menu (create a project, check
for updates, show help, exit):

```
devgeini
```

Create a project directly:

```
devgeini init                  # asks for a name, then the project type and stack
devgeini init --name my-app    # uses the given name, then asks for type and stack
devgeini init --interactive    # asks for everything
```

The project is written into a directory named after the project, in the
current directory. If that directory already exists you are asked whether to
overwrite it. Afterwards the commands for installing dependencies and starting
development are printed.

Keep the tool up to date:

```
devgeini --check-update        # report whether a newer release exists
devgeini --update              # download and install the latest release
devgeini --version
devgeini --help
```

`--update` asks before installing. It picks the release asset built for your
operating system and architecture (falling back to the first asset), keeps a
`.bak` copy of the running program while it replaces it, and handles plain
executables as well as `.tar.gz` and `.zip` archives.

Environment variables:

- `DEVGEINI_NO_UPDATE_CHECK` — when set, skips the quiet background check for a
  newer release that runs when a project is started.
- `DEVGEINI_REPO` — the `owner/name` of the repository whose latest release is
  queried.

## Frontend templates

The writers in `devgeini.frontend` each take a `ProjectConfig` and a target
directory, write the template there and return the list of paths they created:

| Function | Template |
| --- | --- |
| `create_react_project` | Vite + React |
| `create_react_ts_project` | Vite + React + TypeScript |
| `create_vue_project` | Vite + Vue |
| `create_vue_ts_project` | Vite + Vue + TypeScript |
| `create_nextjs_project` | Next.js |
| `create_nextjs_ts_project` | Next.js + TypeScript |
| `create_svelte_project` | Svelte |
| `create_svelte_ts_project` | Svelte (prints a notice; plain Svelte is written) |
| `create_vanilla_project` | Vite + plain JavaScript |
| `create_vanilla_ts_project` | Vite + plain JavaScript (prints a notice) |
| `create_angular_project` | none: raises `RuntimeError` |

`devgeini.scaffold.create_frontend_files(config, path)` dispatches on
`config.frontend_stack` and raises `ValueError` when none is set.

In the interactive menu the five frontend choices are mapped to stacks by
their position, in the order React (TypeScript), React, Vue (TypeScript), Vue,
Angular — the labels shown do not all match the stack that gets written.

## Using it as a library

```python
from pathlib import Path

from devgeini.structure import FrontendStack, ProjectConfig, ProjectType
from devgeini.frontend import create_react_ts_project
from devgeini.instructions import next_steps

config = ProjectConfig(
    name="my-app",
    project_type=ProjectType.FRONTEND,
    frontend_stack=FrontendStack.REACT_TS,
)
target = Path("my-app")
target.mkdir()
created = create_react_ts_project(config, target)
print("\n".join(next_steps(config)))
```

`devgeini.updater.version_compare("1.0.1", "1.2.0")` returns `-1`, `0` or `1`
as the first version is older than, equal to or newer than the second;
non-numeric parts are ignored and missing parts count as zero.

## What it does not do

Only frontend projects can be created. The menu also offers full-stack web
applications, backend APIs, CLI tools and browser extensions, and
`devgeini.instructions.next_steps` knows the follow-up commands for them, but
there are no templates for these kinds: choosing one ends with
"Error creating project" and exit code 1. Angular has no template either.
No `.gitignore`, README or `.env` file is written into new projects, and
dependencies are not installed for you.

## Development

```
pip install -e ".[test]"
pytest
```