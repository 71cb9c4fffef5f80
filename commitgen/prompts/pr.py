"""Pull request description prompt template."""

PR_TEMPLATE = """Write a pull request description in Markdown for merging {{head}} into {{base}}.

Use these sections:
## Summary
One or two sentences on what this change does and why.

## Changes
Bullets grouped by area. Mention notable files or modules.

## Testing
How the change was or should be verified. Say so if nothing in the input shows tests.

## Notes for reviewers
Risks, breaking changes, follow-ups. Omit the section if there are none.

Rules:
- Only describe changes that appear below. Do not invent changes.
- Output ONLY the description. No commentary before or after it.
{{#if context}}

Additional context from the author:
{{context}}
{{/if}}
{{#if include_commits}}

COMMIT HISTORY (each commit with its diff):
{{/if}}
{{#if diff_only}}

DIFF:
{{/if}}
{{changes}}
"""
