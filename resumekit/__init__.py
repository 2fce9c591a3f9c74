"""
resumekit - template-driven resume rendering

Turns a normalized resume record into a paginated PDF using one of a catalog of
interchangeable layouts and a user-chosen accent color.

Architecture:
- Templating Context: resume data model, rich text, themes, layouts, template registry
- Rendering Context: PageTree serialization, document composition, preview pipeline
- Catalog Context: filtering and pagination over the template catalog
"""

__version__ = "0.1.0"
