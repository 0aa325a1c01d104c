"""Marketplace reference data shared by the API and the CLI."""

CATEGORIES = [
    "Web Development",
    "Mobile Development",
    "Backend Development",
    "Frontend Development",
    "Full Stack Development",
    "UI/UX Design",
    "DevOps",
    "AI/ML",
    "Blockchain",
    "Cloud Architecture",
]

PROJECT_TYPES = [
    {"value": "from_scratch", "label": "From Scratch",
     "description": "Starting a new project from the beginning"},
    {"value": "ongoing", "label": "Ongoing Project",
     "description": "Adding features or improvements to an existing project"},
]

PROJECT_PRIORITIES = [
    {"value": "low", "label": "Low", "description": "Flexible timeline, no rush"},
    {"value": "medium", "label": "Medium", "description": "Standard timeline, normal priority"},
    {"value": "high", "label": "High", "description": "Urgent, needs quick turnaround"},
]

COMMON_SKILLS = [
    "React", "Node.js", "Python", "JavaScript", "TypeScript",
    "MongoDB", "PostgreSQL", "AWS", "Docker", "Kubernetes",
    "React Native", "Vue.js", "Angular", "Django", "Flask",
    "GraphQL", "REST API", "Git", "CI/CD", "Testing",
]

# Deletion remarks
REMARK_ENTITY_TYPES = ("bid", "project", "user", "milestone", "consultation", "other")
REMARK_REASON_MAX_LENGTH = 500
