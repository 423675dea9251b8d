"""
Practice mode: generate cipher challenges and score typed answers.
"""

from app.services.practice.challenges import check_answer, generate_challenge, score_answer

__all__ = [
    "check_answer",
    "generate_challenge",
    "score_answer",
]
