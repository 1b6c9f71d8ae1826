from assignment_modifier.modules.prompt_builder import MAX_DOC_CHARS, build_prompt


def test_prompt_joins_tags():
    prompt = build_prompt("Write an essay.", ["ESL", "IEP"], ["word bank", "sentence frames"])
    assert "STUDENT PROFILE(S): ESL, IEP" in prompt
    assert "REQUESTED SUPPORTS: word bank, sentence frames" in prompt
    assert "Write an essay." in prompt


def test_prompt_placeholders_for_empty_tags():
    prompt = build_prompt("Doc", [], [])
    assert "STUDENT PROFILE(S): unspecified" in prompt
    assert "REQUESTED SUPPORTS: standard accommodations" in prompt


def test_prompt_truncates_document():
    overhead = len(build_prompt("", ["ESL"], []))
    prompt = build_prompt("a" * (MAX_DOC_CHARS + 5000), ["ESL"], [])
    assert len(prompt) == overhead + MAX_DOC_CHARS
    assert "a" * MAX_DOC_CHARS in prompt
    assert "a" * (MAX_DOC_CHARS + 1) not in prompt


def test_prompt_is_deterministic_and_describes_schema():
    first = build_prompt("Doc {with} braces", ["504"], ["extra time"])
    assert first == build_prompt("Doc {with} braces", ["504"], ["extra time"])
    assert "Doc {with} braces" in first
    for key in ('"title"', '"notesForTeacher"', '"sections"', '"body"'):
        assert key in first
    assert "Output VALID JSON ONLY" in first
