from pathlib import Path

from aigate.llm.exceptions import LlmError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled prompt template, e.g. ``contract_terms`` -> contract_terms_prompt.txt.

    Raises:
        LlmError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LlmError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled JSON schema, e.g. ``insights`` -> insights_schema.json.

    Raises:
        LlmError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LlmError(f"Failed to load JSON schema: {exc}") from exc
