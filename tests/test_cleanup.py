import pytest

from prompt_enhancer.cleanup import (
    CLEANUP_STEPS,
    clean_completion,
    remove_bold_markers,
    remove_fenced_blocks,
    strip_lead_in,
    strip_wrapping_quotes,
    trim_whitespace,
)


def test_steps_run_in_documented_order():
    assert CLEANUP_STEPS == (
        remove_fenced_blocks,
        remove_bold_markers,
        strip_wrapping_quotes,
        strip_lead_in,
        trim_whitespace,
    )


def test_fenced_blocks_are_removed_with_content():
    raw = "Create a CLI.\n```python\nprint('secret')\n```\nKeep it small.\n```\nmore\n```"
    cleaned = clean_completion(raw)
    assert "```" not in cleaned
    assert "secret" not in cleaned
    assert "more" not in cleaned
    assert cleaned.startswith("Create a CLI.")
    assert cleaned.endswith("Keep it small.")


def test_unterminated_fence_is_left_alone():
    assert remove_fenced_blocks("Intro ```python code") == "Intro ```python code"


def test_bold_markers_removed():
    assert clean_completion("Use **bold** headers and **clear** goals") == "Use bold headers and clear goals"


def test_wrapping_quotes_stripped_once_per_side():
    assert strip_wrapping_quotes('"Design a logo"') == "Design a logo"
    assert strip_wrapping_quotes("'Design a logo'") == "Design a logo"
    assert strip_wrapping_quotes('""nested""') == '"nested"'
    assert strip_wrapping_quotes("no quotes") == "no quotes"


def test_quotes_after_fence_removal_are_stripped():
    raw = '"Write a haiku about rain"\n```\nignored\n```\n'
    assert clean_completion(raw) == "Write a haiku about rain"


@pytest.mark.parametrize(
    "raw",
    [
        "Enhanced prompt: Draw a fox",
        "enhanced PROMPT:Draw a fox",
        "Prompt: Draw a fox",
        "Here's the enhanced prompt: Draw a fox",
        "Here is the enhanced prompt:\nDraw a fox",
        "Enhanced version: Draw a fox",
        '"Prompt: Draw a fox"',
    ],
)
def test_lead_in_phrases_removed(raw: str):
    assert clean_completion(raw) == "Draw a fox"


def test_only_one_lead_in_is_stripped():
    assert strip_lead_in("Prompt: Enhanced version: Draw a fox") == "Enhanced version: Draw a fox"


def test_lead_in_only_stripped_at_start():
    text = "Draw a fox. Prompt: keep it simple"
    assert clean_completion(text) == text


def test_plain_text_passes_through():
    text = "Design a responsive landing page for a coffee shop, with a clear call to action."
    assert clean_completion(text) == text


def test_cleanup_is_idempotent_on_cleaned_text():
    raw = (
        "\"Here's the enhanced prompt: Create a **detailed** travel itinerary for Kyoto.\n"
        "```json\n{\"days\": 3}\n```\n"
        'Include budget tips."\n'
    )
    once = clean_completion(raw)
    assert once == "Create a detailed travel itinerary for Kyoto.\n\nInclude budget tips."
    assert clean_completion(once) == once
    assert "**" not in once
    assert "```" not in once


def test_lead_in_before_quoted_body_keeps_opening_quote():
    # quotes are stripped before the lead-in, so only the closing quote goes on the first pass
    once = clean_completion('Prompt: "Draw a fox"')
    assert once == '"Draw a fox'
    assert clean_completion(once) == "Draw a fox"
