#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest fixtures for integration tests.

Provides:
- temp_output_dir: Temporary directory for exported PDFs
- long_law_corpus: Two laws where the first one holds a multi-page clause
- corpus_file: The corpus written as an engine-format JSON file
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vademecum.contracts import Clause, Law, VademecumDocument


@pytest.fixture
def temp_output_dir():
    """Temporary directory for test outputs."""
    path = Path(tempfile.mkdtemp(prefix="vademecum_"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def long_law_corpus(clause_factory, text_lines):
    """
    First law: three short clauses then one 200-line clause.
    Second law: two short clauses.
    """
    first = Law(
        id="cf88",
        name="Constituição Federal",
        clauses=[clause_factory(i, f"Artigo curto {i}.") for i in range(1, 4)]
        + [clause_factory(4, text_lines(200), highlighted=True, color="amarelo")],
    )
    second = Law(
        id="cc",
        name="Código Civil",
        clauses=[
            Clause(id="cc1", number=1, number_text="1º", text="Toda pessoa é capaz.", highlighted=True, color="roxo"),
            Clause(id="cc2", number=2, number_text="2º", text="A personalidade civil começa do nascimento."),
        ],
    )
    return [first, second]


@pytest.fixture
def corpus_file(temp_output_dir, three_clause_law, render_config):
    """Engine-format document saved as JSON."""
    document = VademecumDocument(config=render_config, laws=[three_clause_law])
    path = temp_output_dir / "corpus.json"
    path.write_text(document.to_json(), encoding="utf-8")
    return path
