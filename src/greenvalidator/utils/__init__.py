"""
Utilities Module for GreenValidator

Helpers shared by the built-in predicates:

- Text and number coercion of subjects
- Date format translation with round-trip checking
- Delimited regex pattern compilation
"""
