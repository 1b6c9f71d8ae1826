"""Assignment Modifier API: adapts Google Doc assignments with an LLM and publishes them back to Google Docs."""

__version__ = "1.0.0"
