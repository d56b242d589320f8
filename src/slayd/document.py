"""Assemble rendered slides into a complete HTML document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from slayd.config import Settings, get_settings
from slayd.slides import render_slides

if TYPE_CHECKING:
    from slayd.models import Document

# Client-side navigation: buttons, arrow keys, slide counter and progress bar.
# Transition effects are driven by the transition-* classes in the theme CSS.
NAVIGATION_SCRIPT = """
    <script>
        let currentSlide = 0;
        const slides = document.querySelectorAll('.slide');
        const totalSlides = slides.length;
        const prevBtn = document.getElementById('prev');
        const nextBtn = document.getElementById('next');
        const currentSpan = document.getElementById('current');
        const totalSpan = document.getElementById('total');
        const progressBar = document.getElementById('progressBar');

        totalSpan.textContent = totalSlides;

        function updateProgress() {
            const progress = ((currentSlide + 1) / totalSlides) * 100;
            progressBar.style.width = progress + '%';
        }

        function showSlide(n) {
            const previous = slides[currentSlide];
            previous.classList.remove('active');
            previous.classList.add('leaving');
            setTimeout(() => previous.classList.remove('leaving'), 600);

            currentSlide = (n + totalSlides) % totalSlides;
            slides[currentSlide].classList.add('active');
            currentSpan.textContent = currentSlide + 1;

            prevBtn.disabled = currentSlide === 0;
            nextBtn.disabled = currentSlide === totalSlides - 1;

            updateProgress();
        }

        function changeSlide(direction) {
            showSlide(currentSlide + direction);
        }

        document.addEventListener('keydown', (e) => {
            if ((e.key === 'ArrowLeft' || e.key === 'PageUp') && currentSlide > 0) {
                changeSlide(-1);
            } else if ((e.key === 'ArrowRight' || e.key === 'PageDown' || e.key === ' ') && currentSlide < totalSlides - 1) {
                changeSlide(1);
            } else if (e.key === 'Home') {
                showSlide(0);
            } else if (e.key === 'End') {
                showSlide(totalSlides - 1);
            }
        });

        showSlide(0);
    </script>"""

HIGHLIGHT_SCRIPT = """
    <script src="{cdn}/highlight.min.js"></script>
    <script>hljs.highlightAll();</script>"""


def _head_links(document: Document, settings: Settings) -> str:
    links = [f'<link rel="stylesheet" href="{settings.stylesheet}">']
    if document.theme:
        links.append(f'<link rel="stylesheet" href="{document.theme}.css">')
    if document.code_theme:
        links.append(
            f'<link rel="stylesheet" href="{settings.highlight_cdn}/styles/{document.code_theme}.min.css">'
        )
    return "\n    ".join(links)


def build_html(document: Document, settings: Settings | None = None) -> str:
    """Build the full HTML document for a presentation.

    Args:
        document: Parsed presentation
        settings: Build settings (defaults to environment settings)

    Returns:
        Complete HTML document as a string
    """
    settings = settings or get_settings()

    slides_html = "\n".join(
        render_slides(
            document,
            isolate_errors=settings.isolate_slide_errors,
            default_transition=settings.default_transition,
        )
    )
    lang = document.lang or settings.default_lang
    highlight = HIGHLIGHT_SCRIPT.format(cdn=settings.highlight_cdn) if document.code_theme else ""

    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{document.title}</title>
    {_head_links(document, settings)}
</head>
<body>
    <div class="progress-bar" id="progressBar"></div>

    <div class="slide-container">
{slides_html}
    </div>

    <div class="slide-number">
        <span id="current">1</span> / <span id="total">{len(document.slides)}</span>
    </div>

    <div class="navigation">
        <button id="prev" onclick="changeSlide(-1)">← Anterior</button>
        <button id="next" onclick="changeSlide(1)">Siguiente →</button>
    </div>
{highlight}{NAVIGATION_SCRIPT}
</body>
</html>
"""
