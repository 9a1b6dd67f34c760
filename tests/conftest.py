import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

CONTRACT_LINES = [
    "This Service Agreement is made between the Client and the Provider.",
    "The Provider shall deliver the services described in Section 2.",
    "Payment is due within thirty days of each invoice date.",
    "Either party may terminate this agreement with written notice.",
]


def build_raw_pdf(body: str, page_count: int = 1) -> bytes:
    """Assemble a minimal uncompressed PDF-like buffer around a content body."""
    pages = "".join(
        f"{3 + i} 0 obj\n<< /Type /Page /Parent 2 0 R >>\nendobj\n"
        for i in range(page_count)
    )
    return (
        "%PDF-1.4\n"
        "1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"
        f"2 0 obj\n<< /Type /Pages /Count {page_count} >>\nendobj\n"
        f"{pages}"
        f"{body}\n"
        "%%EOF\n"
    ).encode("latin-1")


def _render(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=0)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def raw_pdf() -> Callable[..., bytes]:
    """Builder for hand-assembled PDF buffers."""
    return build_raw_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _render([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _render([["Page one content"], ["Page two content"]])


@pytest.fixture()
def contract_pdf_bytes() -> bytes:
    """Generate a one-page PDF holding a few contract sentences."""
    return _render([CONTRACT_LINES])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _render([[]])
