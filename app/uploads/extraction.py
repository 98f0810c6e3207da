import logging
import re

logger = logging.getLogger(__name__)


def _clean_pdf_text(raw: str) -> str:
    if not raw:
        return ""

    raw = raw.replace("\x0c", "\n\n")
    raw = raw.replace("\r\n", "\n").replace("\r", "\n")
    raw = re.sub(r"\n{3,}", "\n\n", raw)
    raw = re.sub(r"[ \t]{2,}", " ", raw)
    raw = "\n".join(line.strip() for line in raw.split("\n"))

    return raw.strip()

def extract_pdf_text(path: str) -> str:
    from pdfminer.high_level import extract_text
    return _clean_pdf_text(extract_text(path) or "")

def extract_image_text(path: str) -> str:
    # needs the tesseract binary on PATH
    import pytesseract
    from PIL import Image
    with Image.open(path) as image:
        return (pytesseract.image_to_string(image) or "").strip()

def extract_text(path: str, file_type: str) -> str | None:
    """Best-effort text extraction. Returns None when extraction fails."""
    try:
        if file_type == "pdf":
            return extract_pdf_text(path)
        return extract_image_text(path)
    except Exception:
        logger.warning("text extraction failed for %s", path, exc_info=True)
        return None
