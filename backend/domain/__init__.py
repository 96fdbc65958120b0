"""Domain layer for PCOS risk intake.

Business rules for field validation, BMI derivation and risk banding,
decoupled from the HTTP surface and from infrastructure.
"""
