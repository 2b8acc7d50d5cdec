# canonical candidate schema and the placeholder table shared by both parsers
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .taxonomy import DEFAULT_SKILLS


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str
    duration: str
    description: str


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    school: str
    year: str
    cgpa: Optional[str] = None
    stream: Optional[str] = None


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    technologies: Tuple[str, ...] = Field(default_factory=tuple)


# Every sentinel lives here. parser_rule fills gaps from it and cleaner
# backfills LLM output from it.
PLACEHOLDERS: Dict[str, Any] = {
    "name": "Unknown",
    "email": "unknown@email.com",
    "phone": "Not provided",
    "linkedin": "",
    "skills": DEFAULT_SKILLS,
    "experience": (
        ExperienceEntry(
            title="Software Engineer",
            company="Tech Company",
            duration="2021 - Present",
            description="Developed web applications using modern technologies",
        ),
    ),
    "education": (
        EducationEntry(
            degree="Bachelor of Science",
            school="University",
            year="2020",
            cgpa="3.5",
            stream="Computer Science",
        ),
    ),
    "certifications": (),
    "projects": (
        ProjectEntry(
            name="Web Application",
            description="Built a full-stack web application",
            technologies=("React", "Node.js", "MongoDB"),
        ),
    ),
}

# fixed texts the heuristics write into otherwise-unparsed fields
EXPERIENCE_DESCRIPTION = "Developed and maintained software applications"
PROJECT_NAME = "Software Project"
PROJECT_DESCRIPTION = "Developed a software application"


class CandidateRecord(BaseModel):
    """Structured candidate extracted from one resume. Every field is always set."""
    model_config = ConfigDict(frozen=True)

    name: str = PLACEHOLDERS["name"]
    email: str = PLACEHOLDERS["email"]
    phone: str = PLACEHOLDERS["phone"]
    linkedin: str = PLACEHOLDERS["linkedin"]
    skills: Tuple[str, ...] = PLACEHOLDERS["skills"]
    experience: Tuple[ExperienceEntry, ...] = PLACEHOLDERS["experience"]
    education: Tuple[EducationEntry, ...] = PLACEHOLDERS["education"]
    certifications: Tuple[str, ...] = PLACEHOLDERS["certifications"]
    projects: Tuple[ProjectEntry, ...] = PLACEHOLDERS["projects"]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict for the matching and persistence collaborators."""
        return self.model_dump(mode="json")


# JSON shape the LLM is asked to fill in
RESUME_SCHEMA = {
    "name": "Full name",
    "email": "Email address",
    "phone": "Phone number",
    "linkedin": "LinkedIn profile URL",
    "skills": ["skill1", "skill2"],
    "experience": [
        {
            "title": "Job title",
            "company": "Company name",
            "duration": "Duration",
            "description": "Brief description",
        }
    ],
    "education": [
        {
            "degree": "Degree name",
            "school": "School name",
            "year": "Year",
            "cgpa": "CGPA/GPA",
            "stream": "Field of study",
        }
    ],
    "certifications": ["cert1", "cert2"],
    "projects": [
        {
            "name": "Project name",
            "description": "Description",
            "technologies": ["tech1", "tech2"],
        }
    ],
}
