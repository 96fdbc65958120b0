"""Field schema for PCOS risk intake.

Declarations live in `fields`; coercion and record parsing in `field_schema`.
"""
