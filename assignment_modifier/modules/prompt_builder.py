"""Prompt construction for assignment modification."""

from __future__ import annotations

from typing import Sequence

# Bound on the document text embedded in the prompt, in characters
MAX_DOC_CHARS = 12000

SYSTEM_PROMPT = (
    "You are an expert special education and ESL co-teacher. "
    "You only return valid JSON, no extra commentary."
)

PROMPT_TEMPLATE = """
You are a veteran special education and ESL co-teacher.
You modify secondary-level assignments for students with ESL/ELL, IEP, and 504 needs.

The teacher has provided an original assignment from a Google Doc.
Your job is to produce a FULLY MODIFIED version that a teacher can give directly to students.

STUDENT PROFILE(S): {profiles}
REQUESTED SUPPORTS: {supports}

ORIGINAL ASSIGNMENT (from Google Doc):
--------------------
{document}
--------------------

REQUIREMENTS:

1. DO NOT just summarize the assignment. Keep the core task and content.
2. Simplify language where needed, without talking down to students.
3. Make the directions extremely clear and step-by-step.
4. Build in explicit supports suited to the profiles above.

STRUCTURE YOUR RESPONSE AS JSON ONLY, WITH THIS SHAPE:

{{
  "title": "Short modified assignment title",
  "notesForTeacher": [
    "Note 1 for the teacher about how to use this",
    "Note 2..."
  ],
  "sections": [
    {{
      "title": "Student-Friendly Directions",
      "body": [
        "Bullet or numbered direction 1 in student-friendly language.",
        "Direction 2...",
        "etc."
      ]
    }},
    {{
      "title": "Chunked Steps",
      "body": [
        "Step 1: ...",
        "Step 2: ...",
        "..."
      ]
    }},
    {{
      "title": "Vocabulary & Language Support",
      "body": [
        "Word Bank:",
        "- term: simple definition",
        "- term: simple definition",
        "Sentence frames:",
        "- I learned that...",
        "- The most important idea is..."
      ]
    }},
    {{
      "title": "Scaffolds & Options",
      "body": [
        "Examples of sentence frames, reduced writing options, checklists, etc.",
        "You can give students a choice board of 2-3 output options, all easier than the original."
      ]
    }},
    {{
      "title": "Student Checklist",
      "body": [
        "[ ] I read or listened to the text.",
        "[ ] I completed the warm-up question.",
        "[ ] I used at least one sentence frame.",
        "[ ] I checked my work."
      ]
    }}
  ]
}}

Rules:
- Output VALID JSON ONLY. No explanations, no markdown, no backticks.
- Keep language appropriate for middle-school reading level unless the text clearly targets older students.
- Do not include the original assignment text in the output.
"""


def join_tags(tags: Sequence[str], placeholder: str) -> str:
    return ", ".join(tags) if tags else placeholder


def build_prompt(doc_text: str, profiles: Sequence[str], supports: Sequence[str]) -> str:
    """Render the modification instructions for one document.

    Profiles fall back to "unspecified" and supports to "standard
    accommodations" when empty. Only the first MAX_DOC_CHARS characters of
    the document are included.
    """
    return PROMPT_TEMPLATE.format(
        profiles=join_tags(profiles, "unspecified"),
        supports=join_tags(supports, "standard accommodations"),
        document=(doc_text or "")[:MAX_DOC_CHARS],
    )
