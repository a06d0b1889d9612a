"""
Builds the instruction string sent to the completion model for a classified prompt.
"""

from __future__ import annotations

from typing import Mapping, Optional

from prompt_enhancer.classifier.categories import Category, normalize_category, signal_groups_for
from prompt_enhancer.prompts.checklists import SIGNAL_LINES, checklist_for

ENHANCEMENT_RULES = """
Enhancement Rules:
- Maintain original intent while adding detail
- Be specific but flexible
- Focus on desired outcomes
- Add relevant context
- Keep natural language flow
- Don't include explanations or metadata

Generate an enhanced prompt that provides clear, detailed instructions while maintaining a natural style.
""".strip()


def build_template(
    category: Category | str | None,
    signals: Optional[Mapping[str, Mapping[str, bool]]],
    original_prompt: str,
) -> str:
    """
    Return the fully resolved enhancement instruction for `original_prompt`.

    Unknown categories fall back to the general checklist. Enabled signal flags
    add one checklist line each, in the order the category declares them.
    """

    resolved = normalize_category(category)
    checklist = checklist_for(resolved)

    extra_points = []
    for group in signal_groups_for(resolved):
        group_flags = (signals or {}).get(group.name) or {}
        for flag in group.flags:
            line = SIGNAL_LINES.get((group.name, flag.name))
            if group_flags.get(flag.name) and line:
                extra_points.append(line)

    preamble = f'Enhance this {resolved.value} prompt to be more detailed and effective:\n"{original_prompt}"'
    return "\n\n".join([preamble, checklist.render(tuple(extra_points)), ENHANCEMENT_RULES])


__all__ = ["ENHANCEMENT_RULES", "build_template"]
