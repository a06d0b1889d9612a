import pytest

from prompt_enhancer.classifier import Category, ClassificationLayer, classify
from prompt_enhancer.classifier.categories import CategoryDefinition, SignalFlag, SignalGroup


@pytest.fixture(scope="module")
def classifier() -> ClassificationLayer:
    return ClassificationLayer()


def test_classifier_is_case_insensitive(classifier: ClassificationLayer) -> None:
    upper = classifier.classify("I want a REACT app")
    lower = classifier.classify("i want a react app")
    assert upper.category == lower.category == Category.REACT


def test_classifier_blog_prompt(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Build me a blog with markdown support")
    assert result.category == Category.BLOG
    assert result.matched_keyword == "blog"


def test_classifier_flags_off_topic_questions(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Who are you, really?")
    assert result.category == Category.INVALID
    assert result.is_invalid
    assert result.signals == {}


def test_invalid_phrase_beats_category_keywords(classifier: ClassificationLayer) -> None:
    result = classifier.classify("What is your name? Also build me a react app")
    assert result.category == Category.INVALID


def test_classifier_falls_back_to_general(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Help me plan my week")
    assert result.category == Category.GENERAL
    assert result.matched_keyword is None
    assert result.signals == {}


def test_earlier_table_entry_wins_ties(classifier: ClassificationLayer) -> None:
    text = "Create a react dashboard for sales numbers"
    results = [classifier.classify(text) for _ in range(5)]
    assert {result.category for result in results} == {Category.DASHBOARD}
    assert all(result.signals["tech_stack"]["react"] for result in results)


def test_substring_matches_inside_unrelated_words(classifier: ClassificationLayer) -> None:
    # "art" inside "party"
    assert classifier.classify("Plan a surprise party").category == Category.IMAGE


def test_tech_stack_signals_are_independent(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Build an online store with Next.js, shadcn and Tailwind")
    assert result.category == Category.ECOMMERCE
    assert result.signals == {
        "tech_stack": {
            "nextjs": True,
            "react": False,
            "vue": False,
            "shadcn": True,
            "tailwind": True,
        }
    }
    assert result.active_signals() == {"tech_stack": ["nextjs", "shadcn", "tailwind"]}


def test_development_category_carries_tech_stack(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Build a website styled with Tailwind")
    assert result.category == Category.DEVELOPMENT
    assert result.active_signals() == {"tech_stack": ["tailwind"]}


def test_framework_category_carries_ui_library_signals(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Vue SPA using Vuetify")
    assert result.category == Category.VUE
    assert result.signals == {"ui_libraries": {"shadcn": False, "tailwind": False, "material": True}}


def test_signals_are_case_insensitive(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Draw a PHOTOREALISTIC mountain, anime inspired")
    assert result.category == Category.IMAGE
    assert result.signals["styles"] == {"realistic": True, "artistic": False, "cartoon": True}


def test_signals_do_not_change_category(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Write a formal essay about creative technical documentation")
    assert result.category == Category.WRITING
    assert all(result.signals["styles"].values())


def test_categories_without_signal_groups_have_empty_signals(classifier: ClassificationLayer) -> None:
    result = classifier.classify("Design a postgres database for a library")
    assert result.category == Category.DATABASE
    assert result.signals == {}


def test_custom_table_order_controls_tie_break() -> None:
    table = (
        CategoryDefinition(Category.WRITING, ("story",)),
        CategoryDefinition(Category.GAME, ("game", "story")),
    )
    layer = ClassificationLayer(table=table, invalid_phrases=())
    assert layer.classify("A game with a story").category == Category.WRITING


def test_custom_signal_group_is_evaluated() -> None:
    group = SignalGroup("extras", (SignalFlag("dark", ("dark mode",)),))
    layer = ClassificationLayer(table=(CategoryDefinition(Category.TOOLS, ("cli",), (group,)),), invalid_phrases=())
    result = layer.classify("A CLI with Dark Mode")
    assert result.signals == {"extras": {"dark": True}}


def test_module_level_classify_uses_builtin_table() -> None:
    assert classify("Scrape product prices from a site").category == Category.SCRAPING


@pytest.mark.parametrize(
    "text, expected",
    [
        ("What are your best tips for a react landing page?", Category.LANDING),
        ("Write an essay: are you really free if you rent?", Category.WRITING),
        ("Who are your customers? Write a short pitch", Category.WRITING),
    ],
)
def test_invalid_phrases_match_whole_words_only(
    classifier: ClassificationLayer, text: str, expected: Category
) -> None:
    result = classifier.classify(text)
    assert not result.is_invalid
    assert result.category == expected


def test_game_keywords_ignore_words_containing_unity(classifier: ClassificationLayer) -> None:
    assert classifier.classify("Write a newsletter for our community garden").category == Category.WRITING
    assert classifier.classify("Build a Unity3D platformer").category == Category.GAME


def test_testing_keywords_ignore_words_containing_jest(classifier: ClassificationLayer) -> None:
    assert classifier.classify("Write a majestic poem").category == Category.WRITING
    assert classifier.classify("Add jest coverage for the cart").category == Category.TESTING
