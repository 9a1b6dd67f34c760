from pathlib import Path

from clausescan.ocr.exceptions import OcrError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_ocr_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled OCR prompt by file stem.

    Raises:
        OcrError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise OcrError(f"Failed to load OCR prompt '{name}': {exc}") from exc
