"""Skill catalog."""

SKILL_CATALOG: tuple[str, ...] = (
    "Apex",
    "Lightning Components",
    "Visualforce",
    "SOQL",
    "JavaScript",
    "HTML/CSS",
    "React",
    "Node.js",
    "Integration",
    "Einstein Analytics",
    "Admin Configuration",
    "Flow Builder",
)


def is_known_skill(skill: str) -> bool:
    """Check whether a skill belongs to the catalog."""
    return skill in SKILL_CATALOG
