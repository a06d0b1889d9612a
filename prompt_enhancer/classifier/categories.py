"""
Static category vocabulary, keyword table, and signal flag definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class Category(str, Enum):
    ECOMMERCE = "ecommerce"
    BOOKING = "booking"
    DASHBOARD = "dashboard"
    CMS = "cms"
    BLOG = "blog"
    SOCIAL = "social"
    GAME = "game"
    LANDING = "landing"
    NEXTJS = "nextjs"
    REACT = "react"
    VUE = "vue"
    AUTH = "auth"
    DATABASE = "database"
    API = "api"
    SCRAPING = "scraping"
    TESTING = "testing"
    DEVOPS = "devops"
    TOOLS = "tools"
    BRANDING = "branding"
    UI_UX = "ui_ux"
    DEVELOPMENT = "development"
    IMAGE = "image"
    WRITING = "writing"
    MARKETING = "marketing"
    AI = "ai"
    GENERAL = "general"
    INVALID = "invalid"


@dataclass(frozen=True)
class SignalFlag:
    name: str
    keywords: Tuple[str, ...]

    def matches_text(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)


@dataclass(frozen=True)
class SignalGroup:
    """
    Named set of independent, non-exclusive flags scoped to a category.
    """

    name: str
    flags: Tuple[SignalFlag, ...]

    def evaluate(self, lowered: str) -> Dict[str, bool]:
        return {flag.name: flag.matches_text(lowered) for flag in self.flags}


@dataclass(frozen=True)
class CategoryDefinition:
    """
    Table entry pairing a category with its trigger keywords and optional signal groups.
    """

    category: Category
    keywords: Tuple[str, ...]
    signal_groups: Tuple[SignalGroup, ...] = ()

    def matching_keyword(self, lowered: str) -> str | None:
        for keyword in self.keywords:
            if keyword in lowered:
                return keyword
        return None


TECH_STACK_SIGNALS = SignalGroup(
    name="tech_stack",
    flags=(
        SignalFlag("nextjs", ("nextjs", "next.js")),
        SignalFlag("react", ("react",)),
        SignalFlag("vue", ("vue",)),
        SignalFlag("shadcn", ("shadcn",)),
        SignalFlag("tailwind", ("tailwind",)),
    ),
)

UI_LIBRARY_SIGNALS = SignalGroup(
    name="ui_libraries",
    flags=(
        SignalFlag("shadcn", ("shadcn",)),
        SignalFlag("tailwind", ("tailwind",)),
        SignalFlag("material", ("material ui", "mui", "vuetify")),
    ),
)

IMAGE_STYLE_SIGNALS = SignalGroup(
    name="styles",
    flags=(
        SignalFlag("realistic", ("realistic", "photorealistic")),
        SignalFlag("artistic", ("artistic", "stylized")),
        SignalFlag("cartoon", ("cartoon", "anime")),
    ),
)

WRITING_STYLE_SIGNALS = SignalGroup(
    name="styles",
    flags=(
        SignalFlag("formal", ("formal", "professional")),
        SignalFlag("creative", ("creative", "story")),
        SignalFlag("technical", ("technical", "documentation")),
    ),
)

MARKETING_PLATFORM_SIGNALS = SignalGroup(
    name="platforms",
    flags=(
        SignalFlag("social", ("social", "instagram", "twitter")),
        SignalFlag("email", ("email", "newsletter")),
        SignalFlag("ads", ("ad", "advertisement")),
    ),
)

AI_FOCUS_SIGNALS = SignalGroup(
    name="focus",
    flags=(
        SignalFlag("prompting", ("prompt", "instruction")),
        SignalFlag("model", ("model", "train")),
        SignalFlag("interaction", ("chat", "conversation")),
    ),
)


# Personal / identity questions that the service refuses to enhance.
# Matched as whole phrases, so "are you real" does not fire on "are you really".
INVALID_PHRASES: Tuple[str, ...] = (
    "who are you",
    "what is your name",
    "what's your name",
    "are you human",
    "are you a bot",
    "are you real",
    "who made you",
    "who created you",
    "how old are you",
    "where are you from",
    "tell me about yourself",
)


# Order is the tie-break: the first entry with any matching keyword wins.
CATEGORY_TABLE: Tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        Category.ECOMMERCE,
        ("ecommerce", "e-commerce", "online store", "shopping cart", "checkout", "storefront", "shopify"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(
        Category.BOOKING,
        ("booking", "reservation", "appointment", "scheduling"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(
        Category.DASHBOARD,
        ("dashboard", "admin panel", "analytics", "kpi"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(
        Category.CMS,
        ("cms", "content management", "wordpress", "strapi"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(Category.BLOG, ("blog", "markdown"), (TECH_STACK_SIGNALS,)),
    CategoryDefinition(
        Category.SOCIAL,
        ("social network", "community platform", "followers", "news feed"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(Category.GAME, ("game", "gaming", "multiplayer", "unity3d", "unity engine", "godot")),
    CategoryDefinition(
        Category.LANDING,
        ("landing page", "hero section", "waitlist", "portfolio site"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(Category.NEXTJS, ("nextjs", "next.js", "next js", "app router"), (UI_LIBRARY_SIGNALS,)),
    CategoryDefinition(Category.REACT, ("react",), (UI_LIBRARY_SIGNALS,)),
    CategoryDefinition(Category.VUE, ("vue", "nuxt"), (UI_LIBRARY_SIGNALS,)),
    CategoryDefinition(
        Category.AUTH,
        ("authentication", "authorization", "login", "logout", "sign-in", "sign up", "signup", "oauth", "jwt"),
    ),
    CategoryDefinition(Category.DATABASE, ("database", "sql", "postgres", "mongodb", "schema")),
    CategoryDefinition(Category.API, (" api", "api ", "graphql", "endpoint", "webhook")),
    CategoryDefinition(Category.SCRAPING, ("scrape", "scraping", "crawler", "crawl")),
    CategoryDefinition(Category.TESTING, ("unit test", "integration test", "test suite", "e2e", "pytest", " jest", "jest ", "cypress")),
    CategoryDefinition(Category.DEVOPS, ("devops", "ci/cd", "docker", "kubernetes", "terraform", "deploy")),
    CategoryDefinition(Category.TOOLS, ("cli tool", "command line", "command-line", "browser extension", "chrome extension", "automate")),
    CategoryDefinition(Category.BRANDING, ("branding", "brand identity", "brand guide", "style guide", "logo")),
    CategoryDefinition(Category.UI_UX, ("ui/ux", "ui design", "ux design", "user interface", "user experience", "wireframe", "figma", "mockup")),
    CategoryDefinition(
        Category.DEVELOPMENT,
        ("app", "website", "code", "develop", "backend", "frontend"),
        (TECH_STACK_SIGNALS,),
    ),
    CategoryDefinition(
        Category.IMAGE,
        ("draw", "generate image", "art", "illustration", "photo", "picture"),
        (IMAGE_STYLE_SIGNALS,),
    ),
    CategoryDefinition(
        Category.WRITING,
        ("write", "article", "story", "essay", "script"),
        (WRITING_STYLE_SIGNALS,),
    ),
    CategoryDefinition(
        Category.MARKETING,
        ("marketing", "ad", "campaign", "social media", "promotion"),
        (MARKETING_PLATFORM_SIGNALS,),
    ),
    CategoryDefinition(
        Category.AI,
        ("chatbot", "ai model", "prompt", "gpt", "machine learning"),
        (AI_FOCUS_SIGNALS,),
    ),
)


CATEGORY_REGISTRY: Dict[Category, CategoryDefinition] = {
    definition.category: definition for definition in CATEGORY_TABLE
}


def normalize_category(value: Any, *, default: Category = Category.GENERAL) -> Category:
    if isinstance(value, Category):
        return value
    if value is None:
        return default
    text = str(value).strip().lower()
    if not text:
        return default
    if text in Category._value2member_map_:
        return Category(text)
    return default


def category_definition_for(value: Category | str | None) -> CategoryDefinition | None:
    """
    Return the table entry for a category; `general` and `invalid` have none.
    """

    return CATEGORY_REGISTRY.get(normalize_category(value))


def signal_groups_for(value: Category | str | None) -> Tuple[SignalGroup, ...]:
    definition = category_definition_for(value)
    return definition.signal_groups if definition else ()


__all__ = [
    "Category",
    "CategoryDefinition",
    "SignalFlag",
    "SignalGroup",
    "CATEGORY_TABLE",
    "CATEGORY_REGISTRY",
    "INVALID_PHRASES",
    "normalize_category",
    "category_definition_for",
    "signal_groups_for",
]
