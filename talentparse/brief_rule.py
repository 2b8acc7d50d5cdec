from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from .schema_resume import CandidateRecord

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=False)

def render_brief(record: CandidateRecord) -> str:
    """Deterministic recruiter brief used when the LLM is unavailable."""
    return env.get_template("brief.txt.j2").render(r=record).strip()
