"""
Backend modules for the Assignment Modifier API.

This package contains the core processing modules:
- doc_fetcher: Google Doc ID extraction and plain-text export
- prompt_builder: modification prompt templating
- llm_handler: OpenAI chat completion and strict JSON parsing
- renderer: assignment JSON to plain text
- doc_publisher: Google Drive upload and public sharing

Usage:
    from assignment_modifier.modules import DocFetcher, ModificationService, DocPublisher
"""

from .doc_fetcher import DocFetcher
from .prompt_builder import build_prompt
from .llm_handler import ModificationService
from .renderer import assignment_to_plain_text
from .doc_publisher import DocPublisher

__all__ = [
    'DocFetcher',
    'build_prompt',
    'ModificationService',
    'assignment_to_plain_text',
    'DocPublisher',
]

__version__ = '1.0.0'
