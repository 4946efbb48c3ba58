"""Prompt Building Package"""

from git_commit_message.prompts.builder import PROMPT_TEMPLATE, build_prompt

__all__ = ["PROMPT_TEMPLATE", "build_prompt"]
