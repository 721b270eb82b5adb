"""Persona templates and prompt composition."""

from .composer import build_system_prompt, compose_prompt
from .personas import PERSONA_TEMPLATES, PersonaTemplate, template_for

__all__ = [
    "PERSONA_TEMPLATES",
    "PersonaTemplate",
    "build_system_prompt",
    "compose_prompt",
    "template_for",
]
