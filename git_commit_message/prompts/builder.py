"""Prompt Builder - Wrap a git diff in the commit message instruction."""

PROMPT_TEMPLATE = (
    "Based on the following git diff, generate a concise, single-line git commit message "
    "in the conventional commit format (e.g., 'feat: add user login' or 'fix: resolve race condition'). "
    "Do not include any explanation, preamble, or markdown formatting. Just the commit message itself.\n\n"
    "Git Diff:\n"
    "```diff\n"
    "{diff}\n"
    "```"
)


def build_prompt(diff: str) -> str:
    """Embed the diff verbatim inside the fixed instruction."""
    return PROMPT_TEMPLATE.format(diff=diff)
