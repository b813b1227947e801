"""Deterministic fallback questions used when the remote question service is unavailable."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .types import Question, SkillCategory

KEYWORD_CAP = 4
DEFAULT_KEYWORDS: Tuple[str, ...] = ("Programming", "Development", "Best Practices")
DEFAULT_SUBJECT = "software development"

RELATED_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "React": ("JavaScript", "TypeScript", "CSS", "HTML"),
    "Vue": ("JavaScript", "TypeScript", "CSS", "HTML"),
    "Angular": ("TypeScript", "JavaScript", "CSS", "HTML"),
    "JavaScript": ("ES6", "TypeScript", "DOM", "Async"),
    "TypeScript": ("JavaScript", "Interfaces", "Types"),
    "CSS": ("HTML", "Responsive Design", "CSS3"),
    "Node.js": ("JavaScript", "Express", "API", "Backend"),
    "Python": ("Django", "Flask", "Backend", "API"),
    "Java": ("Spring", "OOP", "Backend"),
    "SQL": ("Database", "Queries", "Relations"),
    "API Design": ("REST", "GraphQL", "Endpoints"),
    "Microservices": ("Architecture", "Docker", "Kubernetes"),
    "AWS": ("Cloud", "EC2", "S3", "Lambda"),
    "Docker": ("Containers", "DevOps", "Deployment"),
    "Kubernetes": ("Orchestration", "Containers", "DevOps"),
    "CI/CD": ("Automation", "Testing", "Deployment"),
    "Terraform": ("Infrastructure", "IaC", "Cloud"),
    "Monitoring": ("Observability", "Logging", "Metrics"),
    "React Native": ("JavaScript", "Mobile", "iOS", "Android"),
    "Flutter": ("Dart", "Mobile", "UI"),
    "iOS": ("Swift", "Mobile", "Apple"),
    "Android": ("Kotlin", "Mobile", "Java"),
    "Mobile UI/UX": ("Design", "User Experience", "Responsive"),
    "OWASP": ("Security", "Web", "Vulnerabilities"),
    "Encryption": ("Security", "Cryptography", "Data Protection"),
    "Network Security": ("Firewalls", "VPN", "Security"),
    "Pen Testing": ("Security", "Testing", "Vulnerabilities"),
}

SKILL_CATEGORIES: Tuple[SkillCategory, ...] = (
    SkillCategory(
        id="frontend",
        name="Frontend Development",
        skills=("React", "Vue", "Angular", "JavaScript", "TypeScript", "CSS"),
    ),
    SkillCategory(
        id="backend",
        name="Backend Development",
        skills=("Node.js", "Python", "Java", "SQL", "API Design", "Microservices"),
    ),
    SkillCategory(
        id="cloud",
        name="Cloud & DevOps",
        skills=("AWS", "Docker", "Kubernetes", "CI/CD", "Terraform", "Monitoring"),
    ),
    SkillCategory(
        id="mobile",
        name="Mobile Development",
        skills=("React Native", "Flutter", "iOS", "Android", "Mobile UI/UX"),
    ),
    SkillCategory(
        id="security",
        name="Cybersecurity",
        skills=("OWASP", "Encryption", "Network Security", "Pen Testing"),
    ),
)

FALLBACK_RUBRIC: Dict[str, str] = {
    "excellent": "Comprehensive answer covering all key concepts with practical examples",
    "good": "Good understanding with some examples but missing depth in certain areas",
    "needs_improvement": "Basic understanding but lacks depth, examples, or clarity",
}

# (category, prompt template, hint, difficulty, minutes)
_TEMPLATES = (
    (
        "Technical",
        "Explain the key concepts of {skill} and its main advantages in modern development.",
        "Focus on core principles, architecture, and real-world benefits",
        "medium",
        5,
    ),
    (
        "Scenario",
        "Describe a real-world scenario where you would use {skill} and explain your implementation approach.",
        "Think about scalability, performance, and maintainability",
        "medium",
        7,
    ),
    (
        "Best Practices",
        "What are the common challenges or best practices when working with {skill} in a production environment?",
        "Consider debugging, optimization, and team collaboration aspects",
        "hard",
        6,
    ),
)


def related_keywords(skill: str) -> List[str]:
    """Return the related keywords for ``skill`` or the generic defaults."""

    return list(RELATED_KEYWORDS.get((skill or "").strip(), DEFAULT_KEYWORDS))


def find_category(category_id: str) -> Optional[SkillCategory]:
    for category in SKILL_CATEGORIES:
        if category.id == category_id:
            return category
    return None


def synthesize(skill_or_role: str) -> Tuple[List[Question], Dict[str, str]]:
    """Build the three fallback questions and the rubric for ``skill_or_role``.

    Output depends only on the argument, so repeated calls are structurally identical.
    """

    subject = str(skill_or_role or "").strip() or DEFAULT_SUBJECT
    keywords = tuple(related_keywords(subject)[:KEYWORD_CAP])
    questions = [
        Question(
            id=str(position),
            prompt=template.format(skill=subject),
            hint=hint,
            time_limit_minutes=minutes,
            difficulty=difficulty,
            category=category,
            expected_keywords=keywords,
        )
        for position, (category, template, hint, difficulty, minutes) in enumerate(_TEMPLATES, start=1)
    ]
    return questions, dict(FALLBACK_RUBRIC)


__all__ = [
    "DEFAULT_KEYWORDS",
    "FALLBACK_RUBRIC",
    "KEYWORD_CAP",
    "RELATED_KEYWORDS",
    "SKILL_CATEGORIES",
    "find_category",
    "related_keywords",
    "synthesize",
]
