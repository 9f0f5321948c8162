from resume_ats.parser import parse_resume
from resume_ats.scoring.ats import score_resume

__all__ = ["parse_resume", "score_resume"]
