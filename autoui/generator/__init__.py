"""
AutoUI Generator Module

Renders the coming-soon Vue front end from questionnaire answers.
"""

from .vue_generator import VueGenerator

__all__ = ["VueGenerator"]
