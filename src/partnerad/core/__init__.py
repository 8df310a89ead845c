"""
Core modules for partnerad.

This package contains the core logic for:
- Configuration and prompt texts
- Prompt composition
- Image generation via the Gemini API
- Credentials, admin settings and session state
"""
