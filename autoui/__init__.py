"""
AutoUI
Issue-driven questionnaire automation that collects product answers from
GitHub issue comments and renders a "coming soon" front end from them.
"""

__version__ = "0.1.0"
__author__ = "AutoUI Development Team"
__description__ = "Conversational issue questionnaire and Vue scaffold generator"
