"""Pytest configuration and shared fixtures for the md2rtf test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from md2rtf.ast import BulletList, Document, Emphasis, Heading, InlineCode, Link, ListItem, Paragraph, Strong, Text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

# Smallest valid PNG: 1x1 transparent pixel
MINIMAL_PNG = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - parser and renderer together")


@pytest.fixture
def minimal_png() -> bytes:
    """Provide the bytes of a 1x1 PNG image."""
    return MINIMAL_PNG


@pytest.fixture
def sample_document() -> Document:
    """Provide a document exercising every kind with a rendering rule.

    Returns
    -------
    Document
        Heading, paragraph with inline formatting and a link, and a two-item
        bullet list.

    """
    return Document(
        children=[
            Heading(level=2, content=[Text(content="Release notes")]),
            Paragraph(
                content=[
                    Text(content="Run "),
                    InlineCode(content=[Text(content="make")]),
                    Text(content=" then read "),
                    Link(url="docs/index.html", content=[Emphasis(content=[Text(content="the docs")])]),
                    Text(content="."),
                ]
            ),
            BulletList(
                items=[
                    ListItem(children=[Strong(content=[Text(content="Fast")])]),
                    ListItem(children=[Text(content="Small")]),
                ]
            ),
        ]
    )


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown used across parser and integration tests."""
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Section 2

Here is a list:

- Item 1
- Item 2

And a numbered list:

1. First item
2. Second item

```python
print("Hello, World!")
```
"""
