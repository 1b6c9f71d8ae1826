"""Plain-text rendering of a modified assignment."""

from __future__ import annotations

from typing import Any, Dict, List


def _text(value: Any) -> str:
    # JSON null renders as an empty line, not "None"
    return "" if value is None else str(value)


def section_lines(section: Dict[str, Any]) -> List[str]:
    title = str(section.get("title") or "Section")
    body = section.get("body")
    if not isinstance(body, list):
        body = [str(body or "")]

    lines = [title, "-" * len(title)]
    lines.extend(_text(line) for line in body)
    lines.append("")
    return lines


def assignment_to_plain_text(assignment: Dict[str, Any]) -> str:
    """Render an assignment dict as a plain-text document.

    Layout: the uppercased title, a "NOTES FOR TEACHER:" block of "- " items,
    then each section as its title, a dashed underline of the same length,
    its body lines and a blank line.
    """
    lines: List[str] = []

    title = assignment.get("title")
    if title:
        lines.append(str(title).upper())
        lines.append("")

    notes = assignment.get("notesForTeacher")
    if isinstance(notes, list) and notes:
        lines.append("NOTES FOR TEACHER:")
        lines.extend(f"- {_text(note)}" for note in notes)
        lines.append("")

    sections = assignment.get("sections")
    if isinstance(sections, list):
        for section in sections:
            lines.extend(section_lines(section if isinstance(section, dict) else {}))

    return "\n".join(lines)
