from django import template

from careplan.ai import DEFAULT_INSTRUCTION

register = template.Library()


@register.filter
def instruction_for(instructions, name):
    """How to use an ingredient, with the same fallback the PDF uses"""
    try:
        return instructions.get(name) or DEFAULT_INSTRUCTION
    except AttributeError:
        return DEFAULT_INSTRUCTION
