# jitcli

A command line tool and library for looking at Jira-style tickets the way you
look at git branches: epics, tasks and subtasks form a tree, and one of them is
"in focus".

## Installation

```
pip install .
```

This installs the `jit` command.

## Usage

Show the ticket tree, with the focused ticket marked by `@`:

```
jit log
jit log --all                   # also list orphan tasks
jit log --orphan                # the same
jit log --status "In Progress"  # only tickets with that status (case-insensitive)
jit log --json                  # JSON layout
```

An indented layout in which every focused level is marked, followed by a
"Current Focus" summary:

```
jit log-enhanced
jit log-enhanced --orphan
```

Other commands:

```
jit status done         # normalise a status word and report the change
jit cleanup             # report removal of all done tickets
jit cleanup --dry-run   # report what would be removed
jit version             # print the version
jit --version
```

Statuses accept several spellings: `todo`, `to-do`, `to do`, `progress`,
`in-progress`, `in progress`, `done`, `completed`, `complete`, `blocked`,
`block`.

Colours are used when standard output is a terminal; set `NO_COLOR` to turn
them off, or `FORCE_COLOR` / `CLICOLOR_FORCE` to force them on.

## What it does not do

- `jit log` and `jit log-enhanced` display a built-in set of sample tickets
  (`jitcli.ticket.sample_tickets`) with a fixed focus; there is no local ticket
  storage and no configuration file.
- `jit status` and `jit cleanup` only print what they would do; they change
  nothing.
- There is no Jira client: tickets cannot be tracked, created, commented on or
  synchronised, and there are no `track`, `focus`, `epic`, `task`, `subtask`,
  `comment`, `link`, `open`, `init` or `completion` commands.

## Library use

- `jitcli.ticket` — the `Ticket` dataclass and the `TicketType` enum.
- `jitcli.tree` — filters (`filter_tickets_by_status`, `filter_tickets_by_type`,
  `filter_tasks_by_parent`, `filter_subtasks_by_parent`, `filter_orphan_tasks`),
  `sort_tickets` (epics, tasks, subtasks, each by key), and the renderers
  `render_tree` and `render_json`.
- `jitcli.enhanced.render_enhanced_tree` — the `log-enhanced` layout.
- `jitcli.colors` — the colour scheme (`Style`, `get_status_color`,
  `get_ticket_type_color`, `colorize_ticket`, `colorize_header`,
  `colorize_tree_line`).
- `jitcli.workflow` — `normalize_status`, `validate_ticket_key` (raises
  `InvalidTicketKey` unless the key looks like `PROJ-123`), `resolve_focus`,
  `ticket_url`, `comment_template`, `extract_comment`, and `copy_to_clipboard`
  / `open_browser`, which run the platform's clipboard tool or browser opener.
- `jitcli.ai` — AI enrichment of ticket text:
  - `jitcli.ai.factory.new_provider(AIConfig(...))` returns an
    `OpenAIProvider` for `"openai"` or a `MockProvider` for `"mock"` / `"test"`,
    and raises `AIError` for anything else.
  - `OpenAIProvider` calls the chat completions endpoint (default model
    `gpt-3.5-turbo`, 1000 max tokens, temperature 0.7, 30 second timeout). It
    requires an API key and, when created, writes the default prompt templates
    to `./templates/ai` (or the `template_dir` given) if they are not there.
  - `jitcli.ai.provider.enrich_ticket` and `enrich_comment` apply a provider to
    a ticket description or a comment.
  - `jitcli.ai.templates.TemplateManager` loads, caches and renders prompt
    templates using `{{.Field}}` and `{{if .Field}}...{{else}}...{{end}}`.

```python
from jitcli.ai.factory import new_provider
from jitcli.ai.provider import AIConfig, EnrichmentContext

provider = new_provider(AIConfig(provider="mock"))
print(provider.enrich("Add login page", EnrichmentContext(ticket_type="task", project="DEMO")))
```

## Running the tests

```
pip install .[test]
pytest
```