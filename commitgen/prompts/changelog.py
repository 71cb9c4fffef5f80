"""Changelog prompt template."""

CHANGELOG_TEMPLATE = """Write a changelog entry in Markdown for the commits below.

Rules:
- Start with a level-2 heading{{#if version}} for version {{version}}{{/if}}{{#if date_range}} dated {{date_to}}{{/if}}.
- Group entries under level-3 headings such as Added, Changed, Fixed,
  Removed, Deprecated and Security. Leave out empty groups.
- One bullet per user-visible change. Merge commits that describe the same change.
- Skip pure housekeeping (merge commits, formatting, version bumps) unless it matters to readers.
- Output ONLY the changelog. No commentary before or after it.
{{#if audience}}

Audience: {{audience}}
{{#if audience_technical}}
- Write for developers: mention APIs, modules and migration steps by name.
{{/if}}
{{#if audience_end_user}}
- Write for end users: describe visible behaviour in plain language and
  avoid internal names, file paths and implementation details.
{{/if}}
{{#if audience_both}}
- Write a short plain-language summary first, then a "Technical details"
  subsection for developers.
{{/if}}
{{/if}}
{{#if date_range}}

The commits span {{date_from}} to {{date_to}}.
{{/if}}
{{#if repo_url}}

Repository: {{repo_url}}
{{#if link_commits}}
- Link each entry to its commit as [short-hash]({{repo_url}}/commit/<full-hash>).
{{/if}}
{{/if}}
{{#if contributors}}

End with a "Contributors" section thanking these people:
{{contributors}}
{{/if}}
{{#if context}}

Additional context from the maintainers:
{{context}}
{{/if}}

COMMITS:
{{commits}}
"""
