"""Fixed lookup tables for deterministic matching.

Design goals:
- Every keyword list and compatibility rule lives here as plain data, so the
  tables can be tested and extended without touching scoring logic.
- Order matters where noted: classification takes the FIRST category group
  whose keyword appears, so "Sales Engineer" is tech, not sales.

Matching semantics:
- CATEGORY_GROUPS: case-folded substring containment. "ui" also matches
  "build"; this fuzziness is accepted and kept stable.
- CATEGORY_COMPATIBILITY: one-way. A tech user may see management roles
  (tech -> management) and a manager may see tech roles (management -> tech),
  but finance, hr and support accept only themselves.
- EXPERIENCE_COMPATIBILITY: job level -> user levels that fit it.
"""

from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from job_matcher.profile.schema import ExperienceLevel

# Category group -> keywords. Tuple order is evaluation order.
CATEGORY_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "tech",
        (
            "frontend",
            "backend",
            "full stack",
            "fullstack",
            "software",
            "developer",
            "engineer",
            "devops",
            "mobile",
            "ios",
            "android",
            "react",
            "node",
            "python",
            "java",
            "web",
            "data scientist",
            "data analyst",
            "qa",
            "quality",
        ),
    ),
    ("design", ("designer", "ux", "ui", "graphic", "creative", "illustrator", "motion")),
    (
        "finance",
        ("accountant", "finance", "financial", "audit", "payroll", "tax", "bookkeeper", "controller"),
    ),
    ("hr", ("hr", "human resource", "recruiter", "recruitment", "talent acquisition", "talent")),
    ("marketing", ("marketing", "seo", "ppc", "social media", "content marketing", "growth")),
    ("sales", ("sales", "account manager", "business development", "bd")),
    (
        "support",
        (
            "customer support",
            "customer service",
            "help desk",
            "technical support",
            "virtual assistant",
        ),
    ),
    (
        "management",
        (
            "project manager",
            "product manager",
            "scrum master",
            "team lead",
            "operations manager",
            "business analyst",
        ),
    ),
)

CATEGORY_COMPATIBILITY: Dict[str, FrozenSet[str]] = {
    "tech": frozenset({"tech", "design", "management"}),
    "design": frozenset({"design", "tech", "marketing"}),
    "finance": frozenset({"finance"}),
    "hr": frozenset({"hr"}),
    "marketing": frozenset({"marketing", "design", "sales"}),
    "sales": frozenset({"sales", "marketing"}),
    "support": frozenset({"support"}),
    "management": frozenset({"management", "tech"}),
}

_J, _M, _S, _L = (
    ExperienceLevel.JUNIOR,
    ExperienceLevel.MID,
    ExperienceLevel.SENIOR,
    ExperienceLevel.LEAD,
)

# Keys are case-folded job levels.
EXPERIENCE_COMPATIBILITY: Dict[str, FrozenSet[ExperienceLevel]] = {
    "internship": frozenset({_J}),
    "junior": frozenset({_J, _M}),
    "mid": frozenset({_J, _M, _S}),
    "senior": frozenset({_M, _S, _L}),
    "lead": frozenset({_S, _L}),
}

DEFAULT_EXPERIENCE_COMPATIBILITY: FrozenSet[ExperienceLevel] = frozenset({_M, _S})

# Substrings that mark a job as remote-capable / hybrid.
REMOTE_KEYWORDS: Tuple[str, ...] = ("remote", "hybrid")
HYBRID_KEYWORD = "hybrid"

# A Full Stack user gets partial credit on these job types.
FULL_STACK_TYPE = "full stack"
FULL_STACK_ADJACENT_TYPES: Tuple[str, ...] = ("frontend", "backend")


def find_category(texts: Sequence[str]) -> Optional[str]:
    """
    Return the first category group with a keyword in any of the texts.

    Args:
        texts: Case-folded texts to scan (titles, types, desired position)

    Returns:
        Category name, or None when nothing matches
    """
    for category, keywords in CATEGORY_GROUPS:
        if any(keyword in text for keyword in keywords for text in texts):
            return category
    return None


def compatible_categories(category: str) -> FrozenSet[str]:
    """Categories a user in ``category`` may be shown."""
    return CATEGORY_COMPATIBILITY.get(category, frozenset({category}))


def acceptable_levels(job_level: Optional[str]) -> FrozenSet[ExperienceLevel]:
    """User levels that fit a job level (case-insensitive)."""
    key = (job_level or "").strip().lower()
    return EXPERIENCE_COMPATIBILITY.get(key, DEFAULT_EXPERIENCE_COMPATIBILITY)
