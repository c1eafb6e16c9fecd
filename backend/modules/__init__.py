"""
Feature modules for the WordCapture backend.

Each module is self-contained with its own:
- interfaces.py: Abstract service definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules: auth, extraction (Document AI OCR), analysis (OpenAI word and
phrase analysis) and capture (the image-to-words pipeline).
Modules communicate through interfaces, not concrete implementations.
"""
