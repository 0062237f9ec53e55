"""
LittleMeals meal-logging engine.

Validation and data-integrity rules for family meal logs.

Structure:
- domain/shared/: exceptions shared across bounded contexts
- domain/meal_logging/: models, validators, sanitizer, result protocol
- config.py / logging_config.py: environment configuration and logging
- cli.py: command line validation of JSON payloads
"""

__version__ = "1.0.0"
