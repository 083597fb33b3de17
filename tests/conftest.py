import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

CONTRACT_LINES = [
    "CONSULTING AGREEMENT",
    "This agreement is made between Acme ApS and the supplier.",
    "Contact: Anders Holm, anders@acme.dk, +45 12 34 56 78.",
    "The total budget for the services is capped at 250000 DKK.",
    "The maximum number of hours shall not exceed 400 hours.",
    "The deadline for delivery of all deliverables is 2025-12-31.",
    "Work on Project Phoenix is excluded from the scope.",
]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def contract_pdf_bytes() -> bytes:
    """Generate a one-page contract dense enough to count as text-based."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in CONTRACT_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sparse_three_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF with only a few characters per page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for n in range(1, 4):
        c.drawString(72, 720, f"Scan {n}")
        c.showPage()
    c.save()
    return buf.getvalue()
