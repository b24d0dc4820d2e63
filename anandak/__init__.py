"""Anandak bilingual self-assessment: catalog, scoring, wizard and collaborators."""

__version__ = "0.3.0"
