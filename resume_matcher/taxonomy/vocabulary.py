from __future__ import annotations

TECH_KEYWORDS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++", "C#",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "Git", "GitHub",
    "SQL", "MongoDB", "PostgreSQL", "MySQL", "Redis", "Elasticsearch",
    "HTML", "CSS", "SASS", "Vue.js", "Angular", "Express.js", "Django", "Flask",
    "REST API", "GraphQL", "Microservices", "DevOps", "CI/CD", "TDD", "Agile", "Scrum",
    "Machine Learning", "AI", "Data Science", "TensorFlow", "PyTorch", "Pandas",
    "Linux", "Unix", "Bash", "PowerShell", "Terraform", "Ansible",
)

SOFT_SKILLS: tuple[str, ...] = (
    "Leadership", "Project Management", "Team Management", "Communication",
    "Problem Solving", "Critical Thinking", "Collaboration", "Mentoring",
    "Strategic Planning", "Cross-functional", "Stakeholder Management",
)

ALL_KEYWORDS: tuple[str, ...] = TECH_KEYWORDS + SOFT_SKILLS

_LOWERED_KEYWORDS: tuple[tuple[str, str], ...] = tuple((term, term.lower()) for term in ALL_KEYWORDS)


def extract_keywords(text: str) -> list[str]:
    """Return vocabulary terms contained in ``text``, in vocabulary order.

    Matching is a case-insensitive substring test, so short terms also hit
    inside longer words ("Git" in "Digital", "AI" in "maintain").
    """
    lowered = (text or "").lower()
    return [term for term, needle in _LOWERED_KEYWORDS if needle in lowered]
