"""
Pytest configuration and shared fixtures for Vademecum PDF tests.
"""
import sys
import pytest
import tempfile
import shutil
from datetime import datetime
from pathlib import Path
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from vademecum.contracts import Clause, Law, RenderConfig
from vademecum.layout.canvas import RecordingCanvas
from vademecum.agent import VademecumRenderer


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(scope="session")
def test_settings():
    """Test settings with deterministic choices."""
    return Settings(
        language="pt",
        toc_mode="exact",
        continuation_markers="long_only",
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fixed_moment() -> datetime:
    """Generation timestamp used for deterministic output."""
    return datetime(2024, 3, 15, 14, 30, 0)


@pytest.fixture
def render_config(fixed_moment) -> RenderConfig:
    """Minimal render configuration (no notices, no comments)."""
    return RenderConfig(
        title="Vademecum OAB 2024",
        contest="OAB XL",
        author="Maria Souza",
        code="VM-001",
        generated_at=fixed_moment,
    )


# ============================================================================
# Fixtures: Document Model
# ============================================================================

def make_clause(number, text="Texto do artigo.", **kwargs) -> Clause:
    """Build a clause with sensible defaults."""
    kwargs.setdefault("id", f"c{number}")
    kwargs.setdefault("number_text", f"{number}º")
    return Clause(number=number, text=text, **kwargs)


def lines_text(count: int, word: str = "linha") -> str:
    """Text that wraps to exactly `count` lines on any canvas."""
    return "\n".join(f"{word} {i}" for i in range(count))


@pytest.fixture
def clause_factory():
    """Expose make_clause to tests."""
    return make_clause


@pytest.fixture
def text_lines():
    """Expose lines_text to tests."""
    return lines_text


@pytest.fixture
def three_clause_law() -> Law:
    """One law with three short, unhighlighted clauses (inserted out of order)."""
    return Law(
        id="cf88",
        name="Constituição Federal",
        clauses=[
            make_clause(3, "Terceiro artigo."),
            make_clause(1, "Art. 1º - Primeiro artigo."),
            make_clause(2, "Segundo artigo."),
        ],
    )


@pytest.fixture
def marked_laws() -> list:
    """Two laws with highlighted clauses in several colors."""
    return [
        Law(
            id="cdc",
            name="Código de Defesa do Consumidor",
            clauses=[
                make_clause(1, "Proteção do consumidor.", highlighted=True, color="verde"),
                make_clause(2, "Política nacional.", highlighted=True, color="azul"),
                make_clause(3, "Fornecedor.", highlighted=False),
                make_clause(4, "Produto.", highlighted=True, color="verde"),
            ],
        ),
        Law(
            id="cc",
            name="Código Civil",
            clauses=[
                make_clause(1, "Toda pessoa é capaz.", highlighted=True, color="roxo"),
                make_clause(2, "Personalidade civil.", highlighted=True, color="rosa"),
            ],
        ),
    ]


# ============================================================================
# Fixtures: Rendering
# ============================================================================

@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    """Recording canvas with 1.5mm per character (56 characters per body line)."""
    return RecordingCanvas(char_width=1.5)


@pytest.fixture
def recording_renderer(recording_canvas) -> VademecumRenderer:
    """Renderer drawing onto the shared recording canvas."""
    return VademecumRenderer(
        canvas_factory=lambda: recording_canvas,
        toc_mode="exact",
        continuation_policy="long_only",
        app_name="Vade Mecum Estatístico",
    )


@pytest.fixture
def layout_renderer() -> VademecumRenderer:
    """Renderer for layout-only tests (fresh recording canvas per call)."""
    return VademecumRenderer(
        canvas_factory=RecordingCanvas,
        toc_mode="exact",
        continuation_policy="long_only",
        app_name="Vade Mecum Estatístico",
    )
