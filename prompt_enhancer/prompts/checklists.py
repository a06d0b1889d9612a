"""
Focus checklists per category and the extra lines contributed by signal flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from prompt_enhancer.classifier.categories import Category


@dataclass(frozen=True)
class FocusChecklist:
    title: str
    points: Tuple[str, ...]

    def render(self, extra_points: Tuple[str, ...] = ()) -> str:
        lines = [f"{self.title}:"]
        lines.extend(f"- {point}" for point in (*self.points, *extra_points))
        return "\n".join(lines)


GENERAL_CHECKLIST = FocusChecklist(
    "General Enhancement",
    (
        "Key details and specifications",
        "Context and requirements",
        "Quality criteria",
        "Desired outcome",
        "Important parameters",
    ),
)

_WEB_APP_POINTS = (
    "Architecture and structure",
    "User interface and experience",
    "Core features and functionality",
    "Technical requirements",
)

FOCUS_CHECKLISTS: Dict[Category, FocusChecklist] = {
    Category.NEXTJS: FocusChecklist(
        "Next.js Focus",
        (
            "App Router structure and layouts",
            "Server vs client components",
            "Data fetching and caching strategy",
            "Metadata, SEO and performance",
            "Deployment target",
        ),
    ),
    Category.REACT: FocusChecklist(
        "React Focus",
        (
            "Component hierarchy and composition",
            "State management approach",
            "Routing and navigation",
            "Styling solution",
            "Accessibility and responsiveness",
        ),
    ),
    Category.VUE: FocusChecklist(
        "Vue Focus",
        (
            "Component structure and Composition API usage",
            "State management (Pinia or local state)",
            "Routing and navigation",
            "Styling and theming",
            "Build tooling and deployment",
        ),
    ),
    Category.ECOMMERCE: FocusChecklist(
        "E-commerce Focus",
        (
            "Product catalog and search",
            "Cart and checkout flow",
            "Payment and shipping integration",
            "Order management and notifications",
            "Security and trust signals",
        ),
    ),
    Category.BOOKING: FocusChecklist(
        "Booking Focus",
        (
            "Availability and calendar logic",
            "Reservation flow and confirmation",
            "Cancellations and rescheduling",
            "Reminders and notifications",
            "Payments and deposits",
        ),
    ),
    Category.DASHBOARD: FocusChecklist(
        "Dashboard Focus",
        (
            "Key metrics and KPIs",
            "Data sources and refresh rate",
            "Charts and visualizations",
            "Filters, drill-downs and exports",
            "Roles and access control",
        ),
    ),
    Category.CMS: FocusChecklist(
        "CMS Focus",
        (
            "Content types and fields",
            "Editorial workflow and roles",
            "Media management",
            "Publishing and preview",
            "Delivery API or rendering",
        ),
    ),
    Category.BLOG: FocusChecklist(
        "Blog Focus",
        (
            "Post authoring and formatting",
            "Categories, tags and search",
            "Reading experience and layout",
            "Comments and sharing",
            "SEO and feeds",
        ),
    ),
    Category.SOCIAL: FocusChecklist(
        "Social Platform Focus",
        (
            "User profiles and relationships",
            "Feed and content ranking",
            "Posting, reactions and comments",
            "Notifications and messaging",
            "Moderation and safety",
        ),
    ),
    Category.GAME: FocusChecklist(
        "Game Focus",
        (
            "Core gameplay loop",
            "Controls and player feedback",
            "Levels, progression and difficulty",
            "Art style and audio",
            "Target platform and engine",
        ),
    ),
    Category.LANDING: FocusChecklist(
        "Landing Page Focus",
        (
            "Headline and value proposition",
            "Section layout and visual hierarchy",
            "Call to action and conversion goal",
            "Social proof and trust elements",
            "Responsiveness and load speed",
        ),
    ),
    Category.AUTH: FocusChecklist(
        "Authentication Focus",
        (
            "Sign-up and sign-in flows",
            "Providers and identity sources",
            "Session or token handling",
            "Password reset and account recovery",
            "Roles, permissions and security hardening",
        ),
    ),
    Category.DATABASE: FocusChecklist(
        "Database Focus",
        (
            "Entities and relationships",
            "Schema design and constraints",
            "Indexing and query patterns",
            "Migrations and seeding",
            "Backup and scaling considerations",
        ),
    ),
    Category.API: FocusChecklist(
        "API Focus",
        (
            "Resources and endpoints",
            "Request and response formats",
            "Authentication and rate limits",
            "Error handling and status codes",
            "Versioning and documentation",
        ),
    ),
    Category.SCRAPING: FocusChecklist(
        "Scraping Focus",
        (
            "Target sites and data fields",
            "Crawling strategy and pagination",
            "Parsing and data cleaning",
            "Politeness, rate limits and robots rules",
            "Storage and output format",
        ),
    ),
    Category.TESTING: FocusChecklist(
        "Testing Focus",
        (
            "Scope and test levels",
            "Critical paths and edge cases",
            "Fixtures and test data",
            "Tooling and framework",
            "CI integration and coverage goals",
        ),
    ),
    Category.DEVOPS: FocusChecklist(
        "DevOps Focus",
        (
            "Build and CI/CD pipeline",
            "Containerization and orchestration",
            "Environments and configuration",
            "Monitoring and alerting",
            "Rollback and disaster recovery",
        ),
    ),
    Category.TOOLS: FocusChecklist(
        "Tooling Focus",
        (
            "Primary task and inputs",
            "Interface (commands, options or UI)",
            "Outputs and formats",
            "Error handling and feedback",
            "Installation and distribution",
        ),
    ),
    Category.BRANDING: FocusChecklist(
        "Branding Focus",
        (
            "Brand personality and values",
            "Logo concept and usage",
            "Color palette and typography",
            "Target audience and positioning",
            "Applications across touchpoints",
        ),
    ),
    Category.UI_UX: FocusChecklist(
        "UI/UX Focus",
        (
            "User goals and key journeys",
            "Information architecture",
            "Layout, components and visual style",
            "Interaction states and feedback",
            "Accessibility and usability testing",
        ),
    ),
    Category.DEVELOPMENT: FocusChecklist("Development Focus", _WEB_APP_POINTS),
    Category.IMAGE: FocusChecklist(
        "Visual Focus",
        (
            "Subject and composition",
            "Style and mood",
            "Color palette and lighting",
            "Technical specifications",
            "Environmental details",
            "Specific visual elements",
        ),
    ),
    Category.WRITING: FocusChecklist(
        "Writing Focus",
        (
            "Tone and style",
            "Structure and flow",
            "Key points and message",
            "Target audience",
            "Supporting details",
            "Format specifications",
        ),
    ),
    Category.MARKETING: FocusChecklist(
        "Marketing Focus",
        (
            "Target audience",
            "Key message and value proposition",
            "Call to action",
            "Platform-specific requirements",
            "Brand voice and tone",
            "Campaign context",
        ),
    ),
    Category.AI: FocusChecklist(
        "AI Focus",
        (
            "Clear instructions and constraints",
            "Desired output format",
            "Important parameters",
            "Context and requirements",
            "Edge cases to handle",
            "Quality criteria",
        ),
    ),
    Category.GENERAL: GENERAL_CHECKLIST,
}


# Keyed by (signal group, flag); one line per enabled flag.
SIGNAL_LINES: Dict[Tuple[str, str], str] = {
    ("tech_stack", "nextjs"): "Next.js routing with server vs client components",
    ("tech_stack", "react"): "React component structure and state management",
    ("tech_stack", "vue"): "Vue components and reactivity patterns",
    ("tech_stack", "shadcn"): "shadcn/ui component selection, theme and styling patterns",
    ("tech_stack", "tailwind"): "Tailwind CSS utility conventions and design tokens",
    ("ui_libraries", "shadcn"): "shadcn/ui primitives, theming and composition",
    ("ui_libraries", "tailwind"): "Tailwind CSS configuration and utility conventions",
    ("ui_libraries", "material"): "Material component library setup and theme overrides",
    ("styles", "realistic"): "Photorealistic detail, materials and camera settings",
    ("styles", "artistic"): "Artistic medium, brushwork and stylization",
    ("styles", "cartoon"): "Cartoon or anime line work, proportions and shading",
    ("styles", "formal"): "Formal, professional register and terminology",
    ("styles", "creative"): "Narrative voice, imagery and emotional arc",
    ("styles", "technical"): "Technical accuracy, definitions and examples",
    ("platforms", "social"): "Social platform formats, hashtags and posting cadence",
    ("platforms", "email"): "Email subject line, preview text and segmentation",
    ("platforms", "ads"): "Ad formats, targeting and budget constraints",
    ("focus", "prompting"): "Prompt structure, role and explicit instructions",
    ("focus", "model"): "Model choice, training data and evaluation",
    ("focus", "interaction"): "Conversation flow, memory and fallback replies",
}


def checklist_for(category: Category) -> FocusChecklist:
    return FOCUS_CHECKLISTS.get(category, GENERAL_CHECKLIST)


__all__ = ["FocusChecklist", "FOCUS_CHECKLISTS", "GENERAL_CHECKLIST", "SIGNAL_LINES", "checklist_for"]
