from prompt_enhancer.classifier import Category, classify
from prompt_enhancer.prompts.checklists import GENERAL_CHECKLIST, SIGNAL_LINES
from prompt_enhancer.prompts.enhancement_prompt import ENHANCEMENT_RULES, build_template


def test_template_is_deterministic():
    signals = {"styles": {"formal": True, "creative": False, "technical": True}}
    first = build_template(Category.WRITING, signals, "Write an essay on tides")
    second = build_template(Category.WRITING, signals, "Write an essay on tides")
    assert first == second


def test_template_embeds_prompt_verbatim():
    prompt = "Build ME a Blog -- with Markdown support?!"
    template = build_template(Category.BLOG, None, prompt)
    assert f'"{prompt}"' in template
    assert template.startswith("Enhance this blog prompt to be more detailed and effective:")
    assert "Blog Focus:" in template
    assert template.endswith(ENHANCEMENT_RULES)


def test_unknown_category_uses_general_checklist():
    template = build_template("podcast", None, "Plan my week ahead")
    assert template.startswith("Enhance this general prompt")
    assert GENERAL_CHECKLIST.render() in template


def test_invalid_category_falls_back_to_general_checklist():
    template = build_template(Category.INVALID, None, "anything goes here")
    assert GENERAL_CHECKLIST.render() in template


def test_signal_lines_follow_declaration_order():
    # dict order deliberately differs from declaration order
    signals = {"tech_stack": {"tailwind": True, "vue": False, "nextjs": True}}
    template = build_template(Category.DEVELOPMENT, signals, "Build an app")
    nextjs_line = "- " + SIGNAL_LINES[("tech_stack", "nextjs")]
    tailwind_line = "- " + SIGNAL_LINES[("tech_stack", "tailwind")]
    assert template.index(nextjs_line) < template.index(tailwind_line)
    assert SIGNAL_LINES[("tech_stack", "vue")] not in template


def test_each_enabled_flag_adds_exactly_one_line():
    base = build_template(Category.MARKETING, {"platforms": {}}, "Launch campaign for shoes")
    enriched = build_template(
        Category.MARKETING,
        {"platforms": {"social": True, "email": True, "ads": False}},
        "Launch campaign for shoes",
    )
    assert len(enriched.splitlines()) == len(base.splitlines()) + 2


def test_signals_for_undeclared_groups_are_ignored():
    template = build_template(Category.DATABASE, {"tech_stack": {"react": True}}, "Design a schema")
    assert SIGNAL_LINES[("tech_stack", "react")] not in template


def test_template_from_classification_has_no_placeholders():
    prompt = "Build an online store with Next.js and Tailwind"
    result = classify(prompt)
    template = build_template(result.category, result.signals, prompt)
    assert "E-commerce Focus:" in template
    assert SIGNAL_LINES[("tech_stack", "nextjs")] in template
    assert SIGNAL_LINES[("tech_stack", "tailwind")] in template
    assert "{" not in template and "}" not in template
