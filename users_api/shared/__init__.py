"""
Shared module package.

Cross-cutting concerns used by the interface layer:
- Error translation
- Request logging
- Rate limiting
- Logging configuration
"""
