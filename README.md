# gepetto

A small command-line companion for Solana's Pinocchio framework. It creates a
new program project from a template directory. It fills in the program name,
the year and a company name, and it generates a fresh program keypair.

## Installation

```
pip install .
```

## Usage

Run with no command to print a short welcome message:

```
gepetto
```

Create a new project. If you leave out the name, gepetto prompts for it. It
always prompts for a company name:

```
gepetto new some-counter
```

Show the available commands and options:

```
gepetto --help
gepetto --version
```

`gepetto new` reads from a directory named `template` in the current working
directory. It stops with an error and exit status 1 in these cases:

- the `template` directory is missing;
- a directory with the project's name already exists;
- a file operation fails.

### What `new` does

1. Works out three forms of the program name, for example `some-counter`,
   `some_counter` and `Some Counter`.
2. Generates an Ed25519 keypair for the program. The public key, encoded in
   base58, is the program ID.
3. Copies `template/` into a new directory named after the program:
   - It skips `Cargo.lock`, any `*.lock` file, and `target`.
   - It renames a directory called `counter-pinocchio` to the program name.
   - It renders the following as Jinja2 templates:
     - files ending in `.rs`, `.toml`, `.md`, `.json` or `.txt`;
     - files named `LICENSE` or `README`.
   - It copies a file unchanged if the file does not render, for example
     because it uses an unknown variable.
   - It reads and writes every file as UTF-8 text.
4. Writes `program-id.json` into the project. This file holds the 64 keypair
   bytes as a compact JSON array: the 32-byte secret seed, then the 32-byte
   public key.
5. Prints the program ID.

### Template variables

| Variable                  | Example           |
|---------------------------|-------------------|
| `program_name_dash`       | `some-counter`    |
| `program_name_underscore` | `some_counter`    |
| `program_name_readable`   | `Some Counter`    |
| `year`                    | current UTC year  |
| `company_name`            | what you entered  |
| `program_pubkey`          | base58 program ID |

In template files, write a variable in double braces, for example
`{{ program_pubkey }}`.

## What gepetto does not do

gepetto does not ship a project template. You supply the `template`
directory yourself. It does not build, test or deploy the generated program.

## Using it from Python

```python
from gepetto.config import Keypair, b58encode, generate_program_name_variants
from gepetto.commands import scaffold_project

generate_program_name_variants("some-counter")
# ('some_counter', 'Some Counter')

keypair = Keypair.generate()
program_id = b58encode(keypair.pubkey())

config = scaffold_project("some-counter")  # prompts for the company name
config.program_pubkey
```

Other modules you can import:

- `gepetto.validation`: the directory checks and `ValidationError`, plus
  `should_template_file` and `should_skip_file`.
- `gepetto.templating`: `create_template_context`, `copy_template_files`,
  `copy_dir_recursive`, `copy_file_with_templating` and
  `create_program_id_file`.
- `gepetto.prompts`: the prompts and messages used by the command line.

## Running the tests

```
pip install ".[test]"
pytest
```