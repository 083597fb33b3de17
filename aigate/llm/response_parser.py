import json

from aigate.llm.exceptions import LlmResponseError


def parse_json_response(raw: str) -> object:
    """Parse provider text as JSON, tolerating a surrounding Markdown fence."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise LlmResponseError(f"Invalid JSON response: {exc}") from exc
