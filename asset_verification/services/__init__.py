"""
Services Layer
Presentation-specific services used by routes and the CLI.

Services should:
- Not modify data models or business rules
- Convert domain results into JSON-ready dictionaries (snake_case keys, ISO 8601 dates)
- Be stateless
"""
