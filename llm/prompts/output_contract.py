"""
This module renders the output contract appended to every sectioned prompt.
The contract tells the model how to frame each generated file so the section
extractor can split the completion again: either literal marker pairs or one
JSON object keyed by section name.
"""

MARKERS_CONTRACT = """
## OUTPUT FORMAT:
Output exactly {count} section(s), each wrapped in its markers, in this order:

{blocks}

Do not include any other text, comments, or markdown code blocks outside the markers.
"""

MARKER_BLOCK = """{start}
{hint}
{end}"""

JSON_CONTRACT = """
## OUTPUT FORMAT:
Return ONLY one valid JSON object with exactly these string fields:

{fields}

Each value holds the complete content of that file as a string.
No markdown, no explanations, no ```json formatting.
"""

JSON_FIELD = '- "{name}": {hint}'


def render_contract(sections, output_format: str = "markers") -> str:
    """
    Renders the output contract for the given sections.

    Args:
        sections: The ordered section definitions of an artifact kind.
        output_format (str): "markers" for marker pairs, "json" for one JSON object.

    Returns:
        str: The contract text to append to the prompt.
    """
    if output_format == "json":
        fields = "\n".join(JSON_FIELD.format(name=s.name, hint=s.hint) for s in sections)
        return JSON_CONTRACT.format(fields=fields)
    blocks = "\n\n".join(
        MARKER_BLOCK.format(start=s.start_marker, end=s.end_marker, hint=f"// {s.hint}")
        for s in sections
    )
    return MARKERS_CONTRACT.format(count=len(sections), blocks=blocks)
