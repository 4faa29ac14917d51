"""Prompt templates sent to the AI provider."""

WEB_APP_PROMPT_TEMPLATE = """Create a complete web application based on the following requirements.
Return the code in properly formatted code blocks with HTML, CSS, and JavaScript.
Make sure the application is fully functional and responsive.

User requirements: {prompt}

Provide the complete code for a single-page application with the following structure:
1. HTML structure
2. CSS styles (preferably using Tailwind classes)
3. JavaScript functionality

Make sure all components work together and the application is ready to use.

IMPORTANT: Return the complete code in a single HTML file with embedded CSS and JavaScript."""


def build_web_app_prompt(prompt: str) -> str:
    """Wrap a user request so the provider answers with one self-contained HTML document."""
    return WEB_APP_PROMPT_TEMPLATE.format(prompt=prompt.strip())
