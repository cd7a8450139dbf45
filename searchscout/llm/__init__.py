"""
Query submission layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build the labelled-format search prompt from a category and optional location.
- Call a web-search capable Groq model and collect its citation links.
- Hand the answer to the extraction engine; surface provider failures as errors.
"""
